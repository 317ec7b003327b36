"""Host adapters implementing the interfaces in ``models.host``."""
