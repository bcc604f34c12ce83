from django.apps import AppConfig


class AutomataConfig(AppConfig):
    name = 'automata'
    verbose_name = 'Finite state automata'
    default_auto_field = 'django.db.models.BigAutoField'
