"""Business logic for the GUI: services, controllers and navigation."""
