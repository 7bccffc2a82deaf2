"""Tests for formstate.config — FormConfig frozen dataclass."""

import pytest

from formstate.config import FormConfig
from formstate.errors import ConfigurationError
from formstate.field import ValidateTrigger


class TestFormConfig:
    def test_defaults(self) -> None:
        cfg = FormConfig()

        assert cfg.validate_on is ValidateTrigger.SUBMIT
        assert cfg.fallback_error_message == "validation error"
        assert cfg.resubmit == "reject"

    def test_override(self) -> None:
        cfg = FormConfig(validate_on=ValidateTrigger.BLUR, fallback_error_message="Invalid", resubmit="ignore")

        assert cfg.validate_on is ValidateTrigger.BLUR
        assert cfg.fallback_error_message == "Invalid"
        assert cfg.resubmit == "ignore"

    def test_trigger_from_string(self) -> None:
        assert FormConfig(validate_on="change").validate_on is ValidateTrigger.CHANGE  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        cfg = FormConfig()

        with pytest.raises(AttributeError):
            cfg.resubmit = "ignore"  # type: ignore[misc]

    def test_unknown_trigger(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown validate trigger"):
            FormConfig(validate_on="keypress")  # type: ignore[arg-type]

    def test_unknown_resubmit_policy(self) -> None:
        with pytest.raises(ConfigurationError, match="resubmit"):
            FormConfig(resubmit="queue")  # type: ignore[arg-type]
