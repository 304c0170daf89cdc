# -*- coding: utf-8 -*-
"""
用户界面模块
负责界面显示和用户交互
"""
import time
import os
import structlog
from rich.console import Console
from rich.prompt import Prompt, Confirm, IntPrompt

from .theme import COLORS, SYMBOLS
from .menus import Menus

logger = structlog.get_logger(__name__)


class UI:
    """用户界面类，作为UI的主控制器"""

    def __init__(self):
        self.console = Console()
        self.colors = COLORS
        self.symbols = SYMBOLS
        self.menus = Menus(self.console)

    def clear_screen(self):
        """清屏"""
        os.system('cls' if os.name == 'nt' else 'clear')

    def show_main_menu(self, running_count: int = 0):
        """显示主菜单"""
        self.clear_screen()
        logger.info("显示主菜单")
        self.menus.show_main_menu(running_count)

    def show_program_settings_menu(self, argument_mode: str, default_count: int, current_log_days: int):
        """显示程序设置菜单"""
        self.clear_screen()
        logger.info("显示程序设置菜单")
        self.menus.show_program_settings_menu(argument_mode, default_count, current_log_days)

    def show_config_details(self, install_path: str, source: str, config_file: str):
        self.menus.show_config_details(install_path, source, config_file)

    def print_success(self, message: str):
        logger.info(f"输出成功信息: {message}")
        self.console.print(f"{self.symbols['success']} {message}", style=self.colors["success"])

    def print_error(self, message: str):
        logger.error(f"输出错误信息: {message}")
        self.console.print(f"{self.symbols['error']} {message}", style=self.colors["error"])

    def print_warning(self, message: str):
        logger.warning(f"输出警告信息: {message}")
        self.console.print(f"{self.symbols['warning']} {message}", style=self.colors["warning"])

    def print_info(self, message: str):
        logger.info(f"输出提示信息: {message}")
        self.console.print(f"{self.symbols['info']} {message}", style=self.colors["info"])

    def get_input(self, prompt_text: str, default: str = "") -> str:
        logger.info(f"请求用户输入: {prompt_text}", default=default)
        # 去掉从资源管理器拖入路径时带的引号
        user_input = Prompt.ask(prompt_text, default=default, console=self.console).strip().strip('"')
        logger.info(f"用户输入: {user_input}")
        return user_input

    def get_int(self, prompt_text: str, default: int = 0) -> int:
        logger.info(f"请求用户输入整数: {prompt_text}", default=default)
        return IntPrompt.ask(prompt_text, default=default, console=self.console)

    def get_choice(self, prompt_text: str) -> str:
        return self.get_input(prompt_text).upper()

    def confirm(self, prompt_text: str) -> bool:
        logger.info(f"请求用户确认: {prompt_text}")
        user_confirmation = Confirm.ask(prompt_text, console=self.console)
        logger.info(f"用户确认结果: {'是' if user_confirmation else '否'}")
        return user_confirmation

    def countdown(self, seconds: int, message: str = "返回主菜单倒计时"):
        for i in range(seconds, 0, -1):
            self.console.print(f"\r{message}: {i}秒...", style=self.colors["warning"], end="")
            time.sleep(1)
        self.console.print()

    def pause(self, message: str = "按回车键继续..."):
        input(message)


# 全局UI实例
ui = UI()
