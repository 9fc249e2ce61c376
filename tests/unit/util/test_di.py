"""Unit tests for provider selection."""

import pytest

from inkwell.util.di import (
    BackendProvider,
    ProdBackendProvider,
    ProdDomainProvider,
    get_provider,
)
from tests.di import MockBackendProvider, build_test_container


class TestGetProvider:
    def test_concrete_provider_is_used_as_is(self):
        assert get_provider(ProdDomainProvider) is ProdDomainProvider
        assert get_provider(ProdDomainProvider, use_mock=True) is ProdDomainProvider

    def test_mockable_component_selects_by_flag(self):
        assert get_provider(BackendProvider, use_mock=False) is ProdBackendProvider
        assert get_provider(BackendProvider, use_mock=True) is MockBackendProvider


class TestBuildTestContainer:
    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"database"})
