# failchain/core/__init__.py
"""
Core components: the failure-chain engine and failchain's own error types.
"""
