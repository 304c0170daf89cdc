# -*- coding: utf-8 -*-
"""
UI菜单模块
负责定义和显示各种菜单
"""
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .theme import COLORS, SYMBOLS


class Menus:
    """菜单类"""

    def __init__(self, console: Console):
        self.console = console
        self.colors = COLORS
        self.symbols = SYMBOLS

    def print_header(self, running_count: int = 0):
        """打印程序头部"""
        self.console.print(f"\n{self.symbols['rocket']} VRChime 多开启动器", style=self.colors["header"])
        if running_count:
            self.console.print(f"当前运行中的 VRChat 实例: {running_count}", style=self.colors["info"])
        self.console.print("——————————", style=self.colors["border"])
        self.console.print("选择选项", style=self.colors["border"])

    def show_main_menu(self, running_count: int = 0):
        """显示主菜单"""
        self.print_header(running_count)

        self.console.print("====>>启动类<<====")
        self.console.print(f" [A] {self.symbols['rocket']} 启动 VRChat 实例", style=self.colors["success"])

        self.console.print("====>>配置类<<====")
        self.console.print(f" [B] {self.symbols['view']} 查看当前游戏路径", style=self.colors["warning"])
        self.console.print(f" [C] {self.symbols['edit']} 程序设置", style=self.colors["warning"])

        self.console.print("====>>杂项类<<====")
        self.console.print(f" [D] {self.symbols['about']} 关于本程序", style=self.colors["info"])

        self.console.print("====>>退出类<<====")
        self.console.print(f" [Q] {self.symbols['quit']} 退出程序", style=self.colors["exit"])

    def show_config_details(self, install_path: str, source: str, config_file: str):
        """显示解析到的配置"""
        source_map = {"file": "配置文件", "registry": "注册表", "default": "默认值（未找到）"}
        table = Table(show_header=False, border_style=self.colors["border"])
        table.add_row("游戏路径", install_path or "[dim]（空）[/dim]")
        table.add_row("来源", source_map.get(source, source))
        table.add_row("配置文件", config_file)
        self.console.print(Panel(table, title="当前配置", style=self.colors["info"]))

    def show_program_settings_menu(self, argument_mode: str, default_count: int, current_log_days: int):
        """显示程序设置菜单"""
        panel = Panel(
            f"[{self.symbols['edit']} 程序设置]",
            style=self.colors["warning"],
            title="程序设置"
        )
        self.console.print(panel)

        mode_map = {"legacy": "按空白拆分（兼容旧版）", "argv": "作为单个参数传递"}
        self.console.print("\n[bold]启动设置[/bold]")
        self.console.print(f"  启动参数模式: [bold yellow]{mode_map.get(argument_mode, '未知')}[/bold yellow]")
        self.console.print(f"  默认启动实例数: [bold yellow]{default_count}[/bold yellow]")

        self.console.print("\n[bold]日志设置[/bold]")
        self.console.print(f"  日志文件保留天数: [bold yellow]{current_log_days}[/bold yellow] 天")

        self.console.print("\n====>>操作<<====")
        self.console.print(" [A] 切换启动参数模式", style=self.colors["success"])
        self.console.print(" [B] 修改默认启动实例数", style=self.colors["success"])
        self.console.print(" [C] 修改日志保留天数", style=self.colors["success"])
        self.console.print(" [D] 恢复默认设置", style=self.colors["error"])
        self.console.print(f" [Q] {self.symbols['back']} 返回上级", style=self.colors["exit"])
