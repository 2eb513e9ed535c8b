from cinema.services.theatre_service import TheatreService

__all__ = ["TheatreService"]
