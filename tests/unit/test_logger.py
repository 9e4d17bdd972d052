import logging

from checkseq.utils.logger import ROOT_LOGGER, get_logger, setup_logger


def test_get_logger_nests_under_package():
    assert get_logger().name == ROOT_LOGGER
    assert get_logger("checkseq.algorithms.registry").name == "checkseq.algorithms.registry"
    assert get_logger("example").name == "checkseq.example"


def test_setup_logger_replaces_handlers(tmp_path):
    log_file = tmp_path / "checkseq.log"
    name = "checkseq.test_setup"
    logger = setup_logger(name, level=logging.DEBUG, log_file=str(log_file), console_output=False)
    logger = setup_logger(name, level=logging.DEBUG, log_file=str(log_file), console_output=False)
    assert len(logger.handlers) == 1

    logger.debug("table built")
    for h in logger.handlers:
        h.flush()
        h.close()
    assert "table built" in log_file.read_text(encoding="utf-8")


def test_library_logs_debug_records(caplog):
    from checkseq.algorithms import registry

    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER):
        registry.new("lrc")
    assert any("new lrc state" in r.getMessage() for r in caplog.records)
