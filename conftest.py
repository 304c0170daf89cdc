import os
import shutil
import tempfile

_original_cwd = None
_work_dir = None


def pytest_configure(config):
    # 程序配置在导入时写入 config/P-config.toml（相对当前目录），测试期间切到临时目录
    global _original_cwd, _work_dir
    _original_cwd = os.getcwd()
    _work_dir = tempfile.mkdtemp(prefix="vrchime-tests-")
    os.chdir(_work_dir)


def pytest_unconfigure(config):
    if _original_cwd is not None:
        os.chdir(_original_cwd)
    if _work_dir is not None:
        shutil.rmtree(_work_dir, ignore_errors=True)
