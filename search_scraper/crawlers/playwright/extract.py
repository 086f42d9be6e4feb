"""페이지 컨텍스트에서 실행되는 범용 추출기.

검색 결과 페이지는 클라이언트 렌더링이므로 추출은 브라우저 안에서 렌더링된 DOM을
대상으로 합니다. 엔진별 차이는 전부 descriptor(순수 데이터)로 전달되고
스크립트 자체는 하나입니다.
"""

EXTRACT_RESULTS_SCRIPT = """
(profile) => {
    const hasScheme = (value) => /^[a-zA-Z][a-zA-Z\\d+.\\-]*:/.test(value);

    const readField = (root, rule) => {
        const el = rule.selector ? root.querySelector(rule.selector) : root;
        if (!el) {
            return '';
        }
        let value;
        if (!rule.attribute) {
            value = el.textContent;
        } else if (rule.live) {
            value = el[rule.attribute];
        } else {
            value = el.getAttribute(rule.attribute);
        }
        value = typeof value === 'string' ? value : '';
        if (rule.strip) {
            value = value.trim();
        }
        if (value && rule.origin && !hasScheme(value)) {
            value = value.startsWith('/')
                ? rule.origin.replace(/\\/$/, '') + value
                : rule.origin + value;
        }
        return value;
    };

    return Array.from(document.querySelectorAll(profile.container)).map((el) => {
        const row = {};
        for (const [name, rule] of Object.entries(profile.fields)) {
            row[name] = readField(el, rule);
        }
        return row;
    });
}
"""
