from edgegraph.config import ObservabilityConfig, get_config, reset_config
from edgegraph.observability import LOGGER_NAME, configure_logging


def test_defaults():
    config = get_config()

    assert config.graph.check_rep is True
    assert config.observability.level == "WARNING"


def test_config_is_cached_until_reset(monkeypatch):
    first = get_config()
    assert get_config() is first

    monkeypatch.setenv("EDGEGRAPH_LOG_LEVEL", "DEBUG")
    assert get_config().observability.level == "WARNING"

    reset_config()
    assert get_config().observability.level == "DEBUG"


def test_check_rep_env_override(monkeypatch):
    monkeypatch.setenv("EDGEGRAPH_GRAPH_CHECK_REP", "0")
    reset_config()

    assert get_config().graph.check_rep is False


def test_configure_logging_does_not_stack_handlers():
    config = ObservabilityConfig(level="info", format="%(message)s")

    logger = configure_logging(config)
    configure_logging(config)

    assert logger.name == LOGGER_NAME
    assert logger.level == 20
    owned = [h for h in logger.handlers if getattr(h, "_edgegraph_handler", False)]
    assert len(owned) == 1
    assert owned[0].formatter._fmt == "%(message)s"

    logger.removeHandler(owned[0])
    logger.setLevel(0)
