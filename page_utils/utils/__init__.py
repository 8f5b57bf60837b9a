"""Utils: small, domain-agnostic building blocks.

Contents should:
- Take explicit inputs and return plain values
- Hold no state between calls
- Not know about the CLI or logging setup
"""
