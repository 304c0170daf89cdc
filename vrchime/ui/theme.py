# -*- coding: utf-8 -*-
"""
UI主题模块
负责定义颜色、样式等视觉元素
"""
from ..core.p_config import p_config_manager

# 默认颜色定义 (作为备用)
DEFAULT_COLORS = {
    "primary": "#BADFFA",
    "success": "#4AF933",
    "warning": "#F2FF5D",
    "error": "#FF6B6B",
    "info": "#6DA0FD",
    "secondary": "#00FFBB",
    "exit": "#7E1DE4",
    "header": "#BADFFA",
    "border": "bright_black",
    "attention": "#FF45F6"
}

# 配置里缺少的颜色用默认值补齐
COLORS = {**DEFAULT_COLORS, **(p_config_manager.get_theme_colors() or {})}

SYMBOLS = {
    "success": "✅",
    "error": "❌",
    "warning": "⚠️",
    "info": "ℹ️",
    "rocket": "🚀",
    "config": "🔧",
    "quit": "👋",
    "about": "ℹ️",
    "back": "↩️",
    "edit": "📝",
    "view": "👁️",
    "attention": "🚨",
}
