from .session_flash_bag import SessionFlashBag

__all__ = ["SessionFlashBag"]
