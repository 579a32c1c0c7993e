"""Domain layer for faretrack application.

Services are imported from their own modules (e.g.
``faretrack.domain.period.PeriodService``) so that the database layer can
import ``faretrack.domain.entities`` without pulling the services in.
"""
