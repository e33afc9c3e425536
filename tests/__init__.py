"""
Test suite for PyFlowTex package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for parameters, noise synthesis, directional blur, I/O and CLI
- Integration tests for complete generation workflows

Run with: pytest
"""
