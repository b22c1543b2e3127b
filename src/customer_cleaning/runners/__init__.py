from customer_cleaning.runners.local import LocalCleaningPipeline

__all__ = ["LocalCleaningPipeline"]
