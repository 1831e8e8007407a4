from django.apps import AppConfig


class DeliveryRouterConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'delivery_router'
    verbose_name = 'Delivery Tour Routing Service'
