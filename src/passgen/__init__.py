"""
passgen: random passwords, diceware passphrases and entropy-based strength
estimates, drawn from the operating system CSPRNG without modulo bias.
"""

__version__ = "0.3.0"
