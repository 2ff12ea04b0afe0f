from connectfour.debug import DebugManager, DebugLevel


def test_level_filtering():
    manager = DebugManager("connectfour.test")
    manager.configure(level=DebugLevel.INFO)
    assert manager._should_log(DebugLevel.ERROR)
    assert manager._should_log(DebugLevel.INFO)
    assert not manager._should_log(DebugLevel.DEBUG)


def test_component_filtering():
    manager = DebugManager("connectfour.test")
    manager.configure(level=DebugLevel.TRACE, components=["board"])
    assert manager._should_log(DebugLevel.DEBUG, "board")
    assert not manager._should_log(DebugLevel.DEBUG, "ai")
    assert manager._should_log(DebugLevel.DEBUG)


def test_none_silences_everything():
    manager = DebugManager("connectfour.test")
    manager.configure(level=DebugLevel.NONE)
    assert not manager._should_log(DebugLevel.ERROR)


def test_set_from_string():
    manager = DebugManager("connectfour.test")
    manager.set_from_string("trace")
    assert manager.level == DebugLevel.TRACE
    manager.set_from_string("nonsense")
    assert manager.level == DebugLevel.TRACE


def test_file_logging(tmp_path):
    log_file = tmp_path / "game.log"
    manager = DebugManager("connectfour.test_file")
    manager.configure(level=DebugLevel.INFO, log_file=str(log_file))
    manager.info("round finished", "game")
    manager.debug("not written", "game")
    manager.configure(log_file="")
    text = log_file.read_text()
    assert "[game] round finished" in text
    assert "not written" not in text


def test_timer():
    manager = DebugManager("connectfour.test")
    manager.start_timer("work")
    assert manager.end_timer("work") >= 0
    assert manager.end_timer("work") is None
