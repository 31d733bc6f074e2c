"""JavaScript functions used to read and briefly mark DOM elements."""

SNAPSHOT_SCRIPT = """
function describeNode(elem, withAttributes) {
    const parent = elem.parentElement;
    let sameTagIndex = 1;
    let sameTagCount = 1;
    let siblingIndex = 0;

    if (parent) {
        const children = Array.from(parent.children);
        const sameTag = children.filter(c => c.nodeName === elem.nodeName);
        siblingIndex = Math.max(0, children.indexOf(elem));
        sameTagCount = sameTag.length;
        sameTagIndex = sameTag.indexOf(elem) + 1;
    }

    let attributes;
    if (withAttributes) {
        attributes = Array.from(elem.attributes || []).map(a => [a.name, a.value]);
    } else {
        attributes = ['id', 'data-testid', 'data-test-id']
            .filter(name => elem.getAttribute && elem.getAttribute(name))
            .map(name => [name, elem.getAttribute(name)]);
    }

    return {
        tag: elem.nodeName.toLowerCase(),
        attributes: attributes,
        className: typeof elem.className === 'string' ? elem.className : '',
        sameTagIndex: sameTagIndex,
        sameTagCount: sameTagCount,
        siblingIndex: siblingIndex,
        childCount: elem.children ? elem.children.length : 0,
        isBody: elem === document.body
    };
}

function snapshot(elem, styleProps, maxText, maxHtml) {
    if (!elem || elem.nodeType !== 1) {
        return null;
    }

    const chain = [];
    let current = elem;
    while (current) {
        chain.push(describeNode(current, current === elem));
        if (current === document.body) break;
        current = current.parentElement;
    }

    const computedStyles = {};
    try {
        const computed = window.getComputedStyle(elem);
        for (const prop of styleProps) {
            computedStyles[prop] = computed.getPropertyValue(prop);
        }
    } catch (e) {
        // Detached or foreign nodes have no computed style
    }

    return {
        chain: chain,
        text: (elem.innerText || '').trim().slice(0, maxText),
        innerHTML: (elem.innerHTML || '').slice(0, maxHtml),
        computedStyles: computedStyles
    };
}

return snapshot(arguments[0], arguments[1], arguments[2], arguments[3]);
"""

HIGHLIGHT_SCRIPT = """
function highlight(elem, duration) {
    if (!elem || !elem.style) {
        return false;
    }
    const active = globalThis.__elementInspectorHighlights
        || (globalThis.__elementInspectorHighlights = new WeakMap());

    let saved = active.get(elem);
    if (saved) {
        clearTimeout(saved.timer);
    } else {
        saved = { outline: elem.style.outline, offset: elem.style.outlineOffset };
        active.set(elem, saved);
    }

    elem.style.outline = '3px solid #0e639c';
    elem.style.outlineOffset = '2px';
    saved.timer = setTimeout(() => {
        elem.style.outline = saved.outline;
        elem.style.outlineOffset = saved.offset;
        active.delete(elem);
    }, duration);
    return true;
}

let target = arguments[0];
if (typeof target === 'string') {
    try {
        target = document.querySelector(target);
    } catch (e) {
        target = null;
    }
}
return highlight(target, arguments[1]);
"""

ELEMENT_AT_POINT_SCRIPT = """
return document.elementFromPoint(arguments[0], arguments[1]);
"""
