"""
Guildhall Test Suite
====================

Test Organization
-----------------
- tests/unit/domain/   : Domain models and exceptions (pure, no I/O)
- tests/unit/core/     : Configuration, logging and the event bus
- tests/unit/modules/  : Service-layer orchestration

Testing Philosophy
------------------
- Fast, isolated unit tests
- Use pytest markers (unit, domain) to categorize and selectively run tests
- Follow AAA pattern: Arrange, Act, Assert
"""
