# tests/config/test_loader.py
from __future__ import annotations

import logging

import pytest

from failchain import FailChainError, enrich_out_of_memory_error, find_exception, iter_chain
from failchain.config import (
    FailChainConfig,
    OutOfMemoryConfig,
    TraversalConfig,
    get_config,
    load_config,
    set_config,
)
from failchain.core.errors import codes

from tests.helpers import link


def test_defaults_without_yaml(tmp_path):
    config = load_config(tmp_path / "missing.yml")

    assert config.traversal.follow_context is True
    assert config.render.include_suppressed is True
    assert not config.oom.enabled
    assert config.validate() == []


def test_yaml_overrides_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text(
        "traversal:\n"
        "  follow_context: false\n"
        "  max_depth: 50\n"
        "oom:\n"
        "  heap_space_message: Increase the heap size\n"
        "  unknown_key: ignored\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.traversal.follow_context is False
    assert not hasattr(config.traversal, "max_depth")
    assert config.render.include_suppressed is True
    assert config.oom.heap_space_message == "Increase the heap size"
    assert config.oom.metaspace_message is None


def test_invalid_yaml_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "config.yml"
    path.write_text("traversal: [unclosed\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="failchain.config.loader"):
        config = load_config(path)

    assert config.to_dict() == FailChainConfig.default().to_dict()
    assert "Ignoring unreadable config file" in caplog.text


def test_non_mapping_yaml_is_ignored(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    assert load_config(path).to_dict() == FailChainConfig.default().to_dict()


def test_to_dict_round_trip():
    config = FailChainConfig(oom=OutOfMemoryConfig(metaspace_message="meta"))

    assert FailChainConfig.from_dict(config.to_dict()).to_dict() == config.to_dict()


def test_validate_rejects_non_bool_follow_context():
    config = FailChainConfig(traversal=TraversalConfig(follow_context="no"))

    issues = config.validate()

    assert [(i.level, i.path) for i in issues] == [("error", "traversal.follow_context")]


def test_validate_warns_on_empty_oom_message():
    config = FailChainConfig(oom=OutOfMemoryConfig(direct_message="  "))

    issues = config.validate()

    assert len(issues) == 1
    assert issues[0].level == "warn"
    assert issues[0].path == "oom.direct_message"


def test_set_config_rejects_errors():
    with pytest.raises(FailChainError) as excinfo:
        set_config(FailChainConfig(traversal=TraversalConfig(follow_context="yes")))

    assert excinfo.value.error_code == codes.INVALID_CONFIG
    assert get_config().traversal.follow_context is True


def test_active_config_drives_engine():
    try:
        try:
            raise KeyError("inner")
        except KeyError:
            raise ValueError("outer")
    except ValueError as e:
        outer = e

    set_config(FailChainConfig(traversal=TraversalConfig.explicit_only()))
    assert list(iter_chain(outer)) == [outer]
    assert find_exception(outer, KeyError) is None

    set_config(None)
    assert len(list(iter_chain(outer))) == 2
    assert isinstance(find_exception(outer, KeyError), KeyError)


def test_legacy_depth_key_does_not_truncate_search(tmp_path):
    nodes = [ValueError(str(i)) for i in range(4)]
    target = KeyError("deep")
    link(*nodes, target)
    path = tmp_path / "config.yml"
    path.write_text("traversal:\n  max_depth: 2\n", encoding="utf-8")

    set_config(load_config(path))

    assert find_exception(nodes[0], KeyError) is target
    assert list(iter_chain(nodes[0])) == [*nodes, target]


def test_enrich_uses_active_config():
    oom = MemoryError("Metaspace")
    set_config(FailChainConfig(oom=OutOfMemoryConfig(metaspace_message="Raise the metaspace limit")))

    enrich_out_of_memory_error(oom)

    assert str(oom) == "Raise the metaspace limit"
