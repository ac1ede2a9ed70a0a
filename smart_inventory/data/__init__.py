from .item_generator import generate_sample_items

__all__ = ['generate_sample_items']
