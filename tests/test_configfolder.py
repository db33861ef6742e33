from joyconf.configfolder import ConfigFolder, cfg_files_list


def _populate(directory):
    (directory / "b.cfg").write_text("x")
    (directory / "A.cfg").write_text("x")
    (directory / "c.txt").write_text("x")
    (directory / "D.CFG").write_text("x")
    (directory / ".hidden.cfg").write_text("x")
    (directory / "sub.cfg").mkdir()


def test_lists_config_files_without_suffix(tmp_path):
    _populate(tmp_path)
    assert cfg_files_list(tmp_path) == ["A", "b", "D"]


def test_missing_directory_gives_empty_list(tmp_path):
    assert cfg_files_list(tmp_path / "missing") == []


def test_empty_directory(tmp_path):
    assert cfg_files_list(str(tmp_path)) == []


def test_set_folder_path_lists_configs(tmp_path):
    _populate(tmp_path)
    folder = ConfigFolder("elsewhere")
    folder.set_folder_path(tmp_path)
    assert folder.folder_path == str(tmp_path)
    assert folder.configs == ["A", "b", "D"]


def test_same_path_is_ignored(tmp_path):
    folder = ConfigFolder(tmp_path)
    (tmp_path / "new.cfg").write_text("x")
    folder.set_folder_path(tmp_path)
    assert folder.configs == []