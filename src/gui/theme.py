"""
Theme - Centralized color and style definitions
All UI components reference this for consistent styling
"""
import platform

# =============================================================================
# FONTS
# =============================================================================

MONO_FONT = 'Menlo' if platform.system() == 'Darwin' else 'Monospace'

FONT_SIZES = {
    'label': 11,
    'tiny': 9,
}

# =============================================================================
# COLORS
# =============================================================================

COLORS = {
    'background': '#141414',
    'background_dark': '#0d0d0d',
    'background_highlight': '#2e2e2e',
    'border': '#333333',
    'border_light': '#4d4d4d',
    'text': '#cccccc',
    'text_dim': '#777777',
    'text_bright': '#ffffff',
}


def button_style():
    """Small flat button used in panels."""
    return f"""
        QPushButton {{
            background-color: {COLORS['background']};
            color: {COLORS['text']};
            border: 1px solid {COLORS['border']};
            border-radius: 3px;
            padding: 3px 5px;
            font-size: {FONT_SIZES['tiny']}px;
        }}
        QPushButton:hover {{
            background-color: {COLORS['background_highlight']};
        }}
    """
