"""Wren — validation scheduling for form-like inputs.

Decides *when* validation runs and makes sure only the latest attempt's
result is ever applied: debounced on-change validation, event-triggered
validation from a configurable policy, stale-result suppression, and
single-snapshot validation across several forms.

Basic usage::

    from wren import FieldBinding, validate_all

    username = FieldBinding(
        "username", "auto", validate=check_username, on_result=show_errors,
    )
    username.handle_event("change", "alice")   # debounced, 369 ms
    username.handle_event("blur", "alice")     # immediately

    if validate_all(form, [signup_form, address_formset]):
        ...
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0-dev"

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Cancellable": "wren.cancellable",
    "ConfigurationError": "wren.errors",
    "DebounceState": "wren.debounce",
    "Debouncer": "wren.debounce",
    "FieldBinding": "wren.binding",
    "InputError": "wren.errors",
    "PolicyMode": "wren.policy",
    "TargetError": "wren.errors",
    "ValidationConfig": "wren.config",
    "ValidationPolicy": "wren.policy",
    "ValidationSnapshot": "wren.snapshot",
    "ValidationTarget": "wren.coordinator",
    "Widget": "wren.widgets",
    "WrenError": "wren.errors",
    "capture": "wren.snapshot",
    "normalise_validation": "wren.policy",
    "validate_all": "wren.coordinator",
    "validate_all_async": "wren.coordinator",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
