# Design tokens for the focus cycle UI

COLORS = {
    'background': '#F7F9FC',
    'surface': '#E7F0FF',
    'primary': '#5EA1FF',
    'primary_hover': '#4C92F5',
    'danger': '#E5484D',
    'danger_hover': '#CE3A3F',
    'text': '#3C4450',
    'text_strong': '#133A62',
    'border': '#DCE3ED',
    'sidebar_active_bg': '#E7F0FF',
    'sidebar_bg': '#F7F9FC',
    'status_in_progress': '#FFC24B',
    'status_interrupted': '#E5484D',
    'status_finished': '#3BB273',
    'chart_bg': '#F7FAFC',
    'chart_grid': '#C9D8E2',
}

FONTS = {
    'family': 'Inter, Manrope, Arial, sans-serif',
    'timer_size': 96,
    'timer_weight': 'bold',
    'button_size': 18,
    'button_weight': 600,
    'sidebar_size': 16,
    'text': 16,
    'text_strong': 22,
}


def app_stylesheet():
    """QSS for the main window built from the tokens above."""
    return f"""
        QMainWindow, QWidget {{ background: {COLORS['background']}; color: {COLORS['text']};
            font-family: {FONTS['family']}; }}
        QListWidget {{ background: {COLORS['sidebar_bg']}; border: none; font-size: {FONTS['sidebar_size']}px; }}
        QListWidget::item:selected {{ background: {COLORS['sidebar_active_bg']}; color: {COLORS['text_strong']}; }}
        QLabel#TimerLabel {{ font-size: {FONTS['timer_size']}px; font-weight: {FONTS['timer_weight']};
            color: {COLORS['text_strong']}; }}
        QLabel#StatusLabel {{ color: {COLORS['danger']}; }}
        QPushButton#StartBtn {{ background: {COLORS['primary']}; color: white; border-radius: 8px;
            font-size: {FONTS['button_size']}px; font-weight: {FONTS['button_weight']}; }}
        QPushButton#StartBtn:hover {{ background: {COLORS['primary_hover']}; }}
        QPushButton#StartBtn:disabled {{ background: {COLORS['border']}; }}
        QPushButton#StopBtn {{ background: {COLORS['danger']}; color: white; border-radius: 8px;
            font-size: {FONTS['button_size']}px; font-weight: {FONTS['button_weight']}; }}
        QPushButton#StopBtn:hover {{ background: {COLORS['danger_hover']}; }}
    """
