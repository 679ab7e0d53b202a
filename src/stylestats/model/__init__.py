from stylestats.model.record import STAT_FIELDS, StatRecord, error_stat, initial_stat

__all__ = ["STAT_FIELDS", "StatRecord", "error_stat", "initial_stat"]
