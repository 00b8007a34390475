"""ui.ui_theme

Theme constants and CSS for the Streamlit demo.
"""

ACCENT = "#1F4E79"

CONFIDENCE_COLORS = {
    "high": "#2E7D32",
    "medium": "#F9A825",
    "low": "#9E9E9E",
}


def css() -> str:
    return f"""
    <style>
    .qa-header {{
        border-bottom: 2px solid {ACCENT};
        padding: 8px 12px;
        display:flex;
        align-items:center;
        gap:12px;
    }}
    .qa-badge {{
        display:inline-block;
        padding: 2px 8px;
        border-radius: 999px;
        color: white;
        font-size: 12px;
    }}
    .qa-muted {{
        color: #4b4b4b;
        font-size: 13px;
    }}
    </style>
    """
