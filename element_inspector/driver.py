from selenium import webdriver
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from selenium.webdriver.chrome.webdriver import WebDriver
from webdriver_manager.chrome import ChromeDriverManager


def new_webdriver(headless: bool = True, page_load_timeout: int = 10) -> WebDriver:
    options = Options()
    options.page_load_strategy = "eager"
    options.add_argument("--disable-extensions")
    options.add_argument("--start-maximized")
    options.add_argument("--accept-language=en-US,en;q=0.9")
    options.add_experimental_option("excludeSwitches", ["enable-automation"])

    if headless:
        options.add_argument("--headless")
        options.add_argument("--window-size=1900,1080")

    driver = webdriver.Chrome(service=Service(ChromeDriverManager().install()), options=options)
    driver.set_page_load_timeout(page_load_timeout)
    return driver
