from .article_form import ArticleForm
from .base import Form
from .confirmation_form import ConfirmationForm

__all__ = [
    "ArticleForm",
    "ConfirmationForm",
    "Form",
]
