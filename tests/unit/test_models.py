"""Unit tests for dri.models.

Tests construction, validation and engine-alias parsing for the Pydantic
models.
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from dri.models import Container, Image, RawContainer, RawImage


class TestImage:

    def test_construction(self):
        image = Image(name="foo", size=100)
        assert image.model_dump() == {"name": "foo", "size": 100}

    def test_rejects_negative_size(self):
        with pytest.raises(ValidationError):
            Image(name="foo", size=-1)


class TestContainer:

    def test_port_defaults_to_none(self):
        assert Container(name="box").port is None

    @pytest.mark.parametrize("port", [0, 65536])
    def test_rejects_out_of_range_port(self, port):
        with pytest.raises(ValidationError):
            Container(name="box", port=port)


class TestRawImage:

    def test_parses_engine_aliases(self):
        raw = RawImage.model_validate(
            {"Id": "abc", "Names": ["localhost/dri/gg:latest"], "Size": 12, "Labels": None}
        )
        assert raw.primary_name == "localhost/dri/gg:latest"
        assert raw.size == 12

    def test_no_names(self):
        assert RawImage.model_validate({"Size": 1}).primary_name is None
        assert RawImage.model_validate({"Names": [], "Size": 1}).primary_name is None


class TestRawContainer:

    def test_parses_size_and_ports(self):
        raw = RawContainer.model_validate({
            "Names": ["dri-gg"],
            "Size": {"rootFsSize": 300, "rwSize": 4},
            "Ports": [{"host_ip": "127.0.0.1", "container_port": 22, "host_port": 2222,
                       "range": 1, "protocol": "tcp"}],
        })
        assert raw.primary_name == "dri-gg"
        assert raw.size is not None and raw.size.root_fs_size == 300
        assert raw.first_host_port == 2222

    def test_null_ports(self):
        raw = RawContainer.model_validate({"Names": ["dri-gg"], "Ports": None})
        assert raw.first_host_port is None

    def test_unpublished_port_skipped(self):
        raw = RawContainer.model_validate({
            "Names": ["dri-gg"],
            "Ports": [{"container_port": 22, "host_port": 0}, {"container_port": 80, "host_port": 8080}],
        })
        assert raw.first_host_port == 8080

    def test_unreadable_size_becomes_none(self):
        raw = RawContainer.model_validate({"Names": ["dri-gg"], "Size": {"rootFsSize": "lots"}})
        assert raw.primary_name == "dri-gg"
        assert raw.size is None

    def test_port_without_host_port_is_kept(self):
        raw = RawContainer.model_validate({
            "Names": ["dri-gg"],
            "Ports": [{"container_port": 22, "protocol": "tcp"}],
        })
        assert len(raw.ports) == 1
        assert raw.ports[0].host_port is None
        assert raw.first_host_port is None

    def test_unreadable_port_entries_skipped(self):
        raw = RawContainer.model_validate({
            "Names": ["dri-gg"],
            "Ports": [{"host_port": "high"}, "junk", {"host_port": 2222}],
        })
        assert raw.first_host_port == 2222

    def test_non_list_ports_ignored(self):
        raw = RawContainer.model_validate({"Names": ["dri-gg"], "Ports": "22/tcp"})
        assert raw.ports is None
