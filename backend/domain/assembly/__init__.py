"""
Assembly Domain - Custom products and the compatibility engine.

This domain decides which part combinations are legal:
- Rules (rules.py): ordered list of compatibility checks
- Validator (validator.py): applies the rules to attach / replace / type change
- CustomProduct (aggregates.py): the state every change is validated against
"""
