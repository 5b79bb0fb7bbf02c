from oneliners.adapters.randomness import SeededRandomAdapter, SystemRandomAdapter

__all__ = ["SeededRandomAdapter", "SystemRandomAdapter"]
