"""Use cases (application logic) for the hexagonal architecture."""

from nexushub.usecases.collect_price_history import CollectPriceHistoryUseCase

__all__ = ["CollectPriceHistoryUseCase"]
