"""
VRChime 主程序
终端菜单：解析游戏路径、启动多个 VRChat 实例
"""
import sys
import os

# 添加项目根目录到Python路径
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from vrchime.core.logging import setup_logging, get_logger
from vrchime.core.errors import LaunchFailedError, VRChimeError
from vrchime.core.p_config import p_config_manager
from vrchime.modules.launcher import ArgumentMode
from vrchime.ui.interface import ui
from vrchime.utils.process_info import count_running_instances
from vrchime import commands

logger = get_logger(__name__)


class VRChimeLauncher:
    """VRChime 主程序类"""

    def __init__(self):
        self.running = True
        logger.info("VRChime 已启动")

    def _running_count(self) -> int:
        try:
            return count_running_instances()
        except Exception as e:
            logger.warning("统计运行中的实例失败", error=str(e))
            return 0

    def handle_launch(self):
        """处理启动实例"""
        resolved = commands.config_store.resolve()
        game_path = ui.get_input("请输入 VRChat.exe 路径", default=resolved.install_path)
        vrcw_file = ui.get_input("请输入世界文件 (.vrcw) 路径")
        default_count = p_config_manager.get("launch.default_instance_count", 1)
        client_count = ui.get_int("请输入启动实例数量", default=default_count)

        try:
            message = commands.launch_instances(game_path, vrcw_file, client_count)
            ui.print_success(message)
        except LaunchFailedError as e:
            ui.print_error(str(e))
            if e.reason:
                ui.console.print(f"  • 原因: {e.reason}", style=ui.colors["error"])
            if e.launched:
                ui.print_warning(f"失败前已启动 {e.launched} 个实例，它们会继续运行。")
        except VRChimeError as e:
            ui.print_error(str(e))
        ui.pause()

    def handle_show_config(self):
        """显示当前解析到的配置"""
        ui.clear_screen()
        resolved = commands.config_store.resolve()
        ui.show_config_details(resolved.install_path, resolved.source, commands.config_store.config_file)
        ui.pause()

    def handle_program_settings(self):
        """处理程序设置"""
        while True:
            argument_mode = p_config_manager.get("launch.argument_mode", ArgumentMode.LEGACY.value)
            default_count = p_config_manager.get("launch.default_instance_count", 1)
            log_days = p_config_manager.get("logging.log_rotation_days", 30)
            ui.show_program_settings_menu(argument_mode, default_count, log_days)

            choice = ui.get_choice("请选择操作")
            if choice == "Q":
                break
            elif choice == "A":
                new_mode = ArgumentMode.ARGV if argument_mode == ArgumentMode.LEGACY.value else ArgumentMode.LEGACY
                p_config_manager.set("launch.argument_mode", new_mode.value)
                commands.instance_launcher.argument_mode = new_mode
            elif choice == "B":
                count = ui.get_int("请输入默认启动实例数", default=default_count)
                if count < 0:
                    ui.print_error("实例数不能为负数")
                    ui.countdown(1)
                    continue
                p_config_manager.set("launch.default_instance_count", count)
            elif choice == "C":
                days = ui.get_int("请输入日志保留天数", default=log_days)
                if days <= 0:
                    ui.print_error("保留天数必须为正整数")
                    ui.countdown(1)
                    continue
                p_config_manager.set("logging.log_rotation_days", days)
            elif choice == "D":
                if ui.confirm("确定要恢复默认设置吗？"):
                    p_config_manager.reset_to_default()
                    commands.instance_launcher.argument_mode = ArgumentMode.LEGACY
                continue
            else:
                ui.print_error("无效选项")
                ui.countdown(1)
                continue

            if p_config_manager.save():
                ui.print_success("设置已保存")
            else:
                ui.print_error("设置保存失败")
            ui.countdown(1, "返回设置菜单")

    def handle_about_menu(self):
        """处理关于菜单"""
        ui.clear_screen()
        ui.console.print("===关于本程序===", style=ui.colors["primary"])
        ui.console.print("VRChime - VRChat 多开启动器", style=ui.colors["primary"])
        ui.console.print("=================")
        ui.console.print(f"版本：{commands.get_version()}", style=ui.colors["info"])
        ui.console.print("\n技术栈：", style=ui.colors["info"])
        ui.console.print("  • structlog - 结构化日志", style="white")
        ui.console.print("  • rich - 终端UI", style="white")
        ui.console.print("  • toml - 配置管理", style="white")
        ui.console.print("  • FastAPI - WebUI 后端", style="white")
        ui.pause()

    def run(self):
        """运行主程序"""
        try:
            logger.info("主循环开始")

            while self.running:
                ui.show_main_menu(self._running_count())
                choice = ui.get_input("请输入选项").upper()

                logger.debug("用户选择", choice=choice)

                if choice == "Q":
                    self.running = False
                    ui.print_info("感谢使用 VRChime！")
                    logger.info("用户退出程序")
                elif choice == "A":
                    self.handle_launch()
                elif choice == "B":
                    self.handle_show_config()
                elif choice == "C":
                    self.handle_program_settings()
                elif choice == "D":
                    self.handle_about_menu()
                else:
                    ui.print_error("无效选项")
                    ui.countdown(1)

        except KeyboardInterrupt:
            ui.print_info("\n程序被用户中断")
            logger.info("程序被用户中断")
        finally:
            logger.info("程序结束")


def main():
    """主函数"""
    setup_logging()
    app = VRChimeLauncher()
    app.run()


if __name__ == "__main__":
    main()
