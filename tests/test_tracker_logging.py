import io
import logging

from tracker_logging import LoggingPrintRedirector, setup_logging


class ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.messages = []

    def emit(self, record) -> None:
        self.messages.append(record.getMessage())


def _redirector():
    logger = logging.getLogger("pklogview.test")
    logger.propagate = False
    logger.setLevel(logging.INFO)
    handler = ListHandler()
    logger.handlers = [handler]
    console = io.StringIO()
    return LoggingPrintRedirector(console, logger), console, handler


def test_lines_go_to_console_and_log() -> None:
    redirector, console, handler = _redirector()

    redirector.write("[Tracker] Saved\n[Settings] Loaded")
    redirector.flush()

    assert handler.messages == ["[Tracker] Saved", "[Settings] Loaded"]
    assert console.getvalue().startswith("[Tracker] Saved\n")


def test_per_frame_chatter_is_dropped() -> None:
    redirector, console, handler = _redirector()

    redirector.write("[Input] Click at 4,5\n[LogOverlay] Opened\n")

    assert handler.messages == ["[LogOverlay] Opened"]
    assert "Click at" not in console.getvalue()


def test_setup_logging_writes_into_folder(tmp_path) -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    try:
        log_file = setup_logging(str(tmp_path))
        assert log_file == str(tmp_path / "pklogview.log")
        assert (tmp_path / "pklogview.log").exists()
    finally:
        for handler in root.handlers[len(before):]:
            handler.close()
        root.handlers = before


def test_partial_line_waits_for_flush() -> None:
    redirector, console, handler = _redirector()

    redirector.write("[Overlay] Parsing")
    assert handler.messages == []

    redirector.write(" run.log\n[Overlay] Done")
    assert handler.messages == ["[Overlay] Parsing run.log"]

    redirector.flush()
    assert handler.messages == ["[Overlay] Parsing run.log", "[Overlay] Done"]
    assert console.getvalue() == "[Overlay] Parsing run.log\n[Overlay] Done"
