"""Tests for the top-level formstate namespace."""

import importlib

import pytest

import formstate


class TestPublicNamespace:
    def test_exports_match_registry(self) -> None:
        assert sorted(formstate.__all__) == sorted(formstate._LAZY_IMPORTS)

    @pytest.mark.parametrize(("name", "module_name"), sorted(formstate._LAZY_IMPORTS.items()))
    def test_name_is_the_defining_module_object(self, name: str, module_name: str) -> None:
        module = importlib.import_module(module_name)
        assert getattr(formstate, name) is getattr(module, name)

    def test_form_api_reachable_from_top_level(self) -> None:
        form = formstate.FormController(
            {"age": formstate.FieldDescriptor(formstate.NumberType().min(18))},
            on_submit=lambda form: None,
            data={"age": "21"},
        )
        assert form.submit().status is formstate.SubmitStatus.SUBMITTED

    def test_unknown_name(self) -> None:
        with pytest.raises(AttributeError, match="'formstate' has no attribute 'Missing'"):
            getattr(formstate, "Missing")
