"""JavaScript run in the page world to read React's internal fiber tree."""

FIBER_WALK_SCRIPT = """
function getFiber(elem, prefixes) {
    if (!elem) return null;
    for (const key in elem) {
        if (prefixes.some(prefix => key.startsWith(prefix))) {
            return elem[key];
        }
    }
    return null;
}

function nameOf(value) {
    if (!value) return null;
    const name = value.name;
    return typeof name === 'string' ? name : null;
}

function displayNameOf(value) {
    if (!value) return null;
    const displayName = value.displayName;
    return typeof displayName === 'string' ? displayName : null;
}

function describeType(type) {
    if (type === null || type === undefined) {
        return null;
    }
    if (typeof type === 'string') {
        return { kind: 'string', name: type };
    }
    if (typeof type === 'function') {
        return { kind: 'function', name: nameOf(type), displayName: displayNameOf(type) };
    }
    if (typeof type === 'object') {
        const render = type.render;
        const inner = type.type;
        return {
            kind: 'object',
            displayName: displayNameOf(type),
            hasRender: !!render,
            renderName: nameOf(render),
            renderDisplayName: displayNameOf(render),
            innerName: nameOf(inner),
            innerDisplayName: displayNameOf(inner),
            marker: type.$$typeof ? type.$$typeof.toString() : null
        };
    }
    return { kind: typeof type };
}

function describeSource(fiber) {
    const source = fiber._debugSource;
    if (source && source.fileName) {
        return {
            fileName: String(source.fileName),
            lineNumber: source.lineNumber || 0,
            columnNumber: typeof source.columnNumber === 'number' ? source.columnNumber : null
        };
    }
    return null;
}

function encodeValue(value) {
    if (typeof value === 'function') {
        return { '$kind': 'function' };
    }
    if (typeof value === 'object' && value !== null) {
        if (Array.isArray(value)) {
            return { '$kind': 'array', length: value.length };
        }
        return { '$kind': 'object' };
    }
    if (typeof value === 'symbol' || typeof value === 'bigint') {
        return String(value);
    }
    return value;
}

function encodeProps(fiber) {
    const props = fiber.memoizedProps;
    if (!props || typeof props !== 'object') return null;
    const encoded = {};
    for (const key in props) {
        try {
            const value = props[key];
            if (value !== undefined) {
                encoded[key] = encodeValue(value);
            }
        } catch (e) {
            // unreadable prop, left out
        }
    }
    return encoded;
}

function walkFibers(selector, options) {
    let elem;
    try {
        elem = document.querySelector(selector);
    } catch (e) {
        elem = null;
    }
    if (!elem) {
        return { found: false };
    }

    let fiber = getFiber(elem, options.prefixes);
    let parent = elem.parentElement;
    let attempts = 0;
    while (!fiber && parent && attempts < options.maxAncestors) {
        fiber = getFiber(parent, options.prefixes);
        parent = parent.parentElement;
        attempts++;
    }
    if (!fiber) {
        return { found: true, hasRuntime: false };
    }

    const hops = [];
    let error = null;
    let depth = 0;
    while (fiber && depth < options.maxHops) {
        const hop = { type: null, source: null, props: null };
        const failures = [];
        const read = (field, reader) => {
            try {
                hop[field] = reader();
            } catch (e) {
                failures.push(field + ': ' + String(e));
            }
        };
        read('type', () => describeType(fiber.type));
        read('source', () => describeSource(fiber));
        if (depth < options.propsDepth) {
            read('props', () => encodeProps(fiber));
        }
        if (failures.length) {
            hop.error = failures.join('; ');
        }
        hops.push(hop);
        try {
            fiber = fiber.return;
        } catch (e) {
            error = String(e);
            break;
        }
        depth++;
    }

    return { found: true, hasRuntime: true, hops: hops, error: error };
}

return walkFibers(arguments[0], arguments[1]);
"""
