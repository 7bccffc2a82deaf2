"""formstate — typed validation and reactive form state.

Binds named fields to typed values, casts raw input, runs ordered
validation rules and aggregates field state into form state with a
submit lifecycle. No rendering, no storage: a rendering layer reads
``value``/``error``, calls ``on_change()``/``on_blur()`` and ``watch()``es.

Basic usage::

    from formstate import FieldDescriptor, FormController, NumberType, StringType

    form = FormController(
        {
            "age": FieldDescriptor(NumberType().min(18)),
            "email": FieldDescriptor(StringType().email(), required=True),
        },
        on_submit=lambda form: save(form.data),
    )
    form.get_field_controller("age").value = "21"
    outcome = form.submit()

Asynchronous handlers::

    form = FormController(fields, on_submit=AsyncSubmit(save_remote))
    outcome = await form.submit_async()
"""

__version__ = "0.1.0"
__all__ = [
    "ArrayType",
    "AsyncSubmit",
    "BooleanType",
    "ChangeType",
    "CheckboxState",
    "ConfigurationError",
    "DataType",
    "DataValue",
    "DateType",
    "ErrorCode",
    "FieldChange",
    "FieldController",
    "FieldDescriptor",
    "FormChange",
    "FormChangeStatus",
    "FormChangeType",
    "FormConfig",
    "FormController",
    "FormStateError",
    "NumberType",
    "ObjectType",
    "RawValue",
    "StringType",
    "SubmitInProgressError",
    "SubmitOutcome",
    "SubmitStatus",
    "SyncSubmit",
    "TextInput",
    "TypeCastError",
    "UnknownFieldError",
    "UnsupportedInputError",
    "ValidateTrigger",
    "ValidationError",
    "same_as",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ArrayType": "formstate.types",
    "BooleanType": "formstate.types",
    "DataType": "formstate.types",
    "DateType": "formstate.types",
    "NumberType": "formstate.types",
    "ObjectType": "formstate.types",
    "StringType": "formstate.types",
    "DataValue": "formstate.value",
    "ChangeType": "formstate.field",
    "FieldChange": "formstate.field",
    "FieldController": "formstate.field",
    "ValidateTrigger": "formstate.field",
    "same_as": "formstate.field",
    "FieldDescriptor": "formstate.form",
    "FormChange": "formstate.form",
    "FormChangeStatus": "formstate.form",
    "FormChangeType": "formstate.form",
    "FormController": "formstate.form",
    "FormConfig": "formstate.config",
    "CheckboxState": "formstate.inputs",
    "RawValue": "formstate.inputs",
    "TextInput": "formstate.inputs",
    "AsyncSubmit": "formstate.submit",
    "SubmitOutcome": "formstate.submit",
    "SubmitStatus": "formstate.submit",
    "SyncSubmit": "formstate.submit",
    "ErrorCode": "formstate.validation",
    "ValidationError": "formstate.validation",
    "ConfigurationError": "formstate.errors",
    "FormStateError": "formstate.errors",
    "SubmitInProgressError": "formstate.errors",
    "TypeCastError": "formstate.errors",
    "UnknownFieldError": "formstate.errors",
    "UnsupportedInputError": "formstate.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import formstate`` cheap (no anyio import until a form is
    needed) while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
