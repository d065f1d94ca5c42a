"""SVG drawings as closed-form Fourier series and rotating arms."""

__version__ = "0.1.0"
