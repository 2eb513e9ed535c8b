from cinema.handlers.menu import MenuHandler
from cinema.handlers.serializers import MenuChoice

__all__ = ["MenuHandler", "MenuChoice"]
