from .tables import Base, Bookings, Staff, Users, metadata

__all__ = ["Base", "Bookings", "Staff", "Users", "metadata"]
