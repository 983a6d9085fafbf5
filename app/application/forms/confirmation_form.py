from app.application.forms.base import Form


class ConfirmationForm(Form):
    """Empty form: submitting it with a valid token confirms the action."""

    intention = "confirmation"
