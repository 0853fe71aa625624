import os

from logfile.utils.paths import log_file_name, log_file_path


def test_log_file_name():
    assert log_file_name("test", "2024-01-02") == "test_2024-01-02.log"


def test_log_file_name_keeps_dots():
    # Module-style names such as "index.py" are kept as-is
    assert log_file_name("index.py", "2024-01-02") == "index.py_2024-01-02.log"


def test_log_file_name_separators():
    # Slashes/backslashes turned into underscores
    assert log_file_name("a/b\\c", "2024-01-02") == "a_b_c_2024-01-02.log"


def test_log_file_path_joins_dir():
    assert log_file_path("logs", "svc", "2024-01-02") == os.path.join("logs", "svc_2024-01-02.log")
