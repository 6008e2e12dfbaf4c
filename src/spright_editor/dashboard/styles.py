"""Inline styles of the preview dashboard."""

from __future__ import annotations

from typing import Any

PIVOT_SIZE = 6

PAGE_STYLE: dict[str, Any] = {"padding": "20px", "fontFamily": "system-ui, sans-serif"}

TOOLBAR_STYLE: dict[str, Any] = {
    "display": "flex",
    "gap": "8px",
    "alignItems": "center",
    "marginBottom": "12px",
}

INPUTS_STYLE: dict[str, Any] = {"display": "flex", "flexDirection": "column", "gap": "16px"}

INPUT_STYLE: dict[str, Any] = {
    "padding": "8px 12px",
    "border": "1px solid #ddd",
    "borderRadius": "8px",
}

SOURCES_STYLE: dict[str, Any] = {"display": "flex", "flexWrap": "wrap", "gap": "12px"}

TEXT_STYLE: dict[str, Any] = {"fontSize": "12px", "color": "#555", "marginBottom": "4px"}

FRAME_STYLE: dict[str, Any] = {"overflow": "auto", "maxWidth": "100%"}

SPRITE_STYLE: dict[str, Any] = {
    "position": "absolute",
    "boxSizing": "border-box",
    "border": "1px solid rgba(33, 150, 243, 0.8)",
    "backgroundColor": "rgba(33, 150, 243, 0.1)",
}

SPRITE_TEXT_STYLE: dict[str, Any] = {
    "position": "absolute",
    "left": "0",
    "bottom": "100%",
    "fontSize": "10px",
    "whiteSpace": "nowrap",
    "color": "#1565C0",
}

PIVOT_STYLE: dict[str, Any] = {
    "position": "absolute",
    "width": f"{PIVOT_SIZE}px",
    "height": f"{PIVOT_SIZE}px",
    "marginLeft": f"-{PIVOT_SIZE // 2}px",
    "marginTop": f"-{PIVOT_SIZE // 2}px",
    "borderRadius": "50%",
    "backgroundColor": "#FF5722",
}

ERROR_STYLE: dict[str, Any] = {"color": "red", "padding": "12px"}

DIAGNOSTIC_STYLE: dict[str, Any] = {"fontFamily": "monospace", "fontSize": "12px", "color": "#B71C1C"}

EDITOR_STYLE: dict[str, Any] = {"width": "100%", "height": "420px", "fontFamily": "monospace", "fontSize": "13px"}
