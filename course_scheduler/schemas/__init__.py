from .generation import Preference, GenerationOptions

__all__ = ['Preference', 'GenerationOptions']
