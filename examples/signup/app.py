"""Signup — registration form driven by a FormController.

Demonstrates formstate's form lifecycle without any UI toolkit: a
scripted "user" types into fields, leaves them, and submits. Watchers
print what a view layer would re-render.

Accounts are stored in memory — this is a demo, not production auth.

Demonstrates:
- ``StringType`` rules: ``min_length``, ``max_length``, ``match``, ``email``,
  ``strong_password``
- ``same_as()`` for password confirmation
- ``required`` with a custom message, ``check()`` for a custom rule
- Per-field triggers (``blur`` for the username, ``change`` for the rest)
- ``AsyncSubmit`` with a handler that can reject the submission

Run:
    python app.py
"""

import anyio

from formstate import (
    AsyncSubmit,
    BooleanType,
    CheckboxState,
    FieldDescriptor,
    FormChange,
    FormChangeStatus,
    FormController,
    StringType,
    TextInput,
    same_as,
)


class DuplicateUserError(Exception):
    """The username is already taken."""


# ---------------------------------------------------------------------------
# In-memory "database"
# ---------------------------------------------------------------------------

_users: list[dict[str, str]] = []


async def register(form: FormController) -> None:
    """Store the account, or reject it when the username is taken."""
    await anyio.sleep(0)
    data = form.data
    if any(user["username"] == data["username"] for user in _users):
        raise DuplicateUserError(f"Username {data['username']!r} is already taken")
    _users.append({"username": data["username"], "email": data["email"]})


# ---------------------------------------------------------------------------
# Form
# ---------------------------------------------------------------------------

FIELDS = {
    "username": FieldDescriptor(
        StringType()
        .min_length(3)
        .max_length(30)
        .match(r"^[A-Za-z0-9_]+$", "Only letters, numbers, and underscores allowed"),
        required="Username is required",
        validate_on="blur",
        meta={"label": "Username"},
    ),
    "email": FieldDescriptor(StringType().email(), required=True, meta={"label": "Email"}),
    "password": FieldDescriptor(StringType().strong_password(), required=True, meta={"label": "Password"}),
    "confirm_password": FieldDescriptor(
        StringType(),
        validate=same_as("password"),
        meta={"label": "Confirm password"},
    ),
    "terms": FieldDescriptor(
        BooleanType().check(lambda accepted: accepted is True, "TERMS", "You must accept the terms"),
        meta={"label": "I accept the terms"},
    ),
}


def build_form() -> FormController:
    return FormController(FIELDS, on_submit=AsyncSubmit(register), validate_on="change")


def render(form: FormController, change: FormChange) -> None:
    """Print what a view would redraw after *change*."""
    if change.field is not None:
        error = change.field.error
        shown = form.translate_error(error) if error is not None else "ok"
        print(f"  {change.field.name}: {change.field.value!r} ({shown})")
    elif change.status is FormChangeStatus.SUBMITTED:
        print(f"  submitted: {change.error or 'account created'}")
    else:
        print(f"  {change.status}...")


async def main() -> None:
    for attempt in ("first", "second"):
        print(f"{attempt} signup:")
        form = build_form()
        form.watch(render)
        form.get_field_controller("username").on_change(TextInput("ada_l"))
        form.get_field_controller("username").on_blur()
        form.get_field_controller("email").on_change(TextInput("ada@example.com"))
        form.get_field_controller("password").on_change(TextInput("Engine#1843"))
        form.get_field_controller("confirm_password").on_change(TextInput("Engine#1843"))
        form.get_field_controller("terms").on_change(CheckboxState(checked=True))
        await form.submit_async()


if __name__ == "__main__":
    anyio.run(main)
