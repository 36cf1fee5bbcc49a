from feedback_api.api import ContactController, health

ROUTES = [
    health,
    ContactController,
]
