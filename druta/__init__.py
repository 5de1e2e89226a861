"""DRUTA CLI -- scaffold and remove React Native, Expo and Next.js components."""

__version__ = "1.0.0"
