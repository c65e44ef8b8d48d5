# StringKit Test Suite
"""
Test suite including:
- Unit tests per subpackage (text, security, encoding)
- Error taxonomy and validation tests
- Facade integration tests

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
