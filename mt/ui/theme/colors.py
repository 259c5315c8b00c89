# Color palettes keyed by display name. Every theme must define every key.
THEMES = {
    "Slate Dark": {
        "bg": "#0f172a",
        "text": "#FFFFFF",
        "text_muted": "#64748b",
        "button_bg": "#374151",
        "button_text": "#FFFFFF",
        "button_active": "#4b5563",
        "border": 0,
        "separator": "#334155",
        "panel_bg": "#1e293b",
        "row_separator": "#334155",
        "row_dragged": "#1e3a8a",
        "progress_bg": "#1f2937",
        "progress_top": "#60a5fa",
        "progress_mid": "#2563eb",
        "progress_bottom": "#1e293b",
        "danger_text": "#ef4444",
        "overrun_text": "#fca5a5",
    },
    "Cupertino Light": {
        "bg": "#F5F5F7",
        "text": "#1D1D1F",
        "text_muted": "#8E8E93",
        "button_bg": "#FFFFFF",
        "button_text": "#1D1D1F",
        "button_active": "#E5E5EA",
        "border": 1,
        "separator": "#D1D1D6",
        "panel_bg": "#FFFFFF",
        "row_separator": "#E5E5EA",
        "row_dragged": "#D6E4FF",
        "progress_bg": "#E5E5EA",
        "progress_top": "#5AC8FA",
        "progress_mid": "#007AFF",
        "progress_bottom": "#0A4DA2",
        "danger_text": "#FF3B30",
        "overrun_text": "#FF3B30",
    },
}
