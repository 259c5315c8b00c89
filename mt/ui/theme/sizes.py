# Point sizes and spacing presets.
SIZES = {
    "Regular": {
        "label": 12,
        "time": 20,
        "action": 16,
        "padding": 6,
        "h_spacing": 6,
        "v_spacing": 4,
        "frame_pad": 10,
        "bar_height": 60,
    },
}
