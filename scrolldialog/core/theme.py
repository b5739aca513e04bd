from PyQt6.QtGui import QColor

LIGHT_THEME_PALETTE = {
    "Window": QColor("#ffffff"),
    "WindowText": QColor("#1f1f1f"),
    "Base": QColor("#ffffff"),
    "AlternateBase": QColor("#e1e1e1"),
    "ToolTipBase": QColor("#ffffff"),
    "ToolTipText": QColor("#1f1f1f"),
    "Text": QColor("#1f1f1f"),
    "Button": QColor("#e1e1e1"),
    "ButtonText": QColor("#1f1f1f"),
    "BrightText": QColor("#ff0000"),
    "Highlight": QColor("#0078D4"),
    "HighlightedText": QColor("#ffffff"),
    "accent": QColor("#0078D4"),
    "button.default.background": QColor("#ffffff"),
    "button.default.background.hover": QColor("#f8f8f8"),
    "button.default.background.pressed": QColor("#e9e9e9"),
    "button.default.border": QColor("#1E000000"),
    "button.default.bottom.edge": QColor("#32000000"),
    "button.primary.background": QColor("#0078D4"),
    "button.primary.background.hover": QColor("#1a86d9"),
    "button.primary.background.pressed": QColor("#006cbe"),
    "button.primary.border": QColor("#1E000000"),
    "button.primary.bottom.edge": QColor("#46000000"),
    "button.primary.text": QColor("#ffffff"),
    "dialog.background": QColor("#ffffff"),
    "dialog.text": QColor("#1f1f1f"),
    "dialog.border": QColor("#c0c0c0"),
    "dialog.message.background": QColor("#fafafa"),
}

DARK_THEME_PALETTE = {
    "Window": QColor("#2b2b2b"),
    "WindowText": QColor("#ffffff"),
    "Base": QColor("#3c3c3c"),
    "AlternateBase": QColor("#313131"),
    "ToolTipBase": QColor("#3c3c3c"),
    "ToolTipText": QColor("#ffffff"),
    "Text": QColor("#ffffff"),
    "Button": QColor("#3c3c3c"),
    "ButtonText": QColor("#ffffff"),
    "BrightText": QColor("#ff0000"),
    "Highlight": QColor("#0096FF"),
    "HighlightedText": QColor("#ffffff"),
    "accent": QColor("#0096FF"),
    "button.default.background": QColor("#3c3c3c"),
    "button.default.background.hover": QColor("#4a4a4a"),
    "button.default.background.pressed": QColor("#555555"),
    "button.default.border": QColor("#26FFFFFF"),
    "button.default.bottom.edge": QColor("#1EFFFFFF"),
    "button.primary.background": QColor("#0096FF"),
    "button.primary.background.hover": QColor("#1aa1ff"),
    "button.primary.background.pressed": QColor("#0087e6"),
    "button.primary.border": QColor("#26FFFFFF"),
    "button.primary.bottom.edge": QColor("#1EFFFFFF"),
    "button.primary.text": QColor("#ffffff"),
    "dialog.background": QColor("#2b2b2b"),
    "dialog.text": QColor("#ffffff"),
    "dialog.border": QColor("#888888"),
    "dialog.message.background": QColor("#323232"),
}
