"""Tests for WalkerConfig."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from zkwalker import (
    ConfigError,
    WalkerConfig,
    print_znode_path,
    print_znode_path_and_content,
)


class TestFromConnectionString:

    def test_splits_servers(self):
        config = WalkerConfig.from_connection_string("zk1:2181,zk2:2181,zk3:2181")
        assert config.servers == ["zk1:2181", "zk2:2181", "zk3:2181"]

    def test_drops_blank_entries(self):
        config = WalkerConfig.from_connection_string(" zk1:2181, ,zk2:2181,")
        assert config.servers == ["zk1:2181", "zk2:2181"]

    def test_passes_options_through(self):
        config = WalkerConfig.from_connection_string(
            "zk1:2181", root="/app", print_content=True, auth="u:p",
        )
        assert config.root == "/app"
        assert config.print_content is True
        assert config.auth == "u:p"

    def test_defaults(self):
        config = WalkerConfig.from_connection_string("zk1:2181")
        assert config.root == "/"
        assert config.auth is None
        assert config.print_content is False
        assert config.timeout == 10.0
        assert config.strategy == "recursive"


class TestValidate:

    def test_valid_config(self):
        WalkerConfig(servers=["zk1:2181"], auth="user:pass").validate()

    @pytest.mark.parametrize("servers", [
        ["zk1:2181"],
        ["zk1"],
        ["10.0.0.1:2181", "zk2:2182/app"],
    ])
    def test_valid_servers(self, servers):
        WalkerConfig(servers=servers).validate()

    @pytest.mark.parametrize("server,message", [
        ("zk1:notaport", "invalid port"),
        ("zk1:", "invalid port"),
        ("zk1:70000", "invalid port"),
        (":2181", "no host"),
    ])
    def test_malformed_server(self, server, message):
        with pytest.raises(ConfigError, match=message):
            WalkerConfig(servers=["zk0:2181", server]).validate()

    @pytest.mark.parametrize("kwargs,message", [
        ({"servers": []}, "server"),
        ({"root": "app"}, "absolute"),
        ({"timeout": 0}, "timeout"),
        ({"strategy": "bfs"}, "strategy"),
        ({"auth": "nopassword"}, "username:password"),
    ])
    def test_invalid_config(self, kwargs, message):
        params = {"servers": ["zk1:2181"]}
        params.update(kwargs)

        with pytest.raises(ConfigError, match=message):
            WalkerConfig(**params).validate()

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            WalkerConfig().validate()


class TestZnodeProcessor:

    def test_path_only_by_default(self):
        assert WalkerConfig().znode_processor() is print_znode_path

    def test_print_content(self):
        assert WalkerConfig(print_content=True).znode_processor() is print_znode_path_and_content
