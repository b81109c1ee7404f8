"""
JavaScript 脚本存储模块 - 基础设施层实现

将页面清理用的 JavaScript 代码集中管理，方便维护和测试。

脚本通过 DrissionPage 的 run_js(script, *args) 执行，
脚本体内以 arguments[0] 读取传入的选择器列表。

模块结构:
- REMOVE_ELEMENTS: 从 DOM 中直接移除元素
- HIDE_ELEMENTS: 以 display:none 隐藏元素（保留在 DOM 中）
"""

from typing import Final


class ScriptStore:
    """
    JavaScript 脚本存储

    集中管理所有 JavaScript 脚本，提供类型安全的访问方式。
    """

    # ============================================================
    # 移除遮挡元素（返回移除数量）
    # ============================================================
    REMOVE_ELEMENTS: Final[str] = """
        const selectors = arguments[0] || [];
        let removed = 0;
        for (const selector of selectors) {
            try {
                document.querySelectorAll(selector).forEach((el) => {
                    el.remove();
                    removed++;
                });
            } catch (e) {}
        }
        return removed;
    """

    # ============================================================
    # 隐藏广告元素（返回隐藏数量）
    # ============================================================
    HIDE_ELEMENTS: Final[str] = """
        const selectors = arguments[0] || [];
        let hidden = 0;
        for (const selector of selectors) {
            try {
                document.querySelectorAll(selector).forEach((el) => {
                    if (el instanceof HTMLElement) {
                        el.style.display = 'none';
                        hidden++;
                    }
                });
            } catch (e) {}
        }
        return hidden;
    """
