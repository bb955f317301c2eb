"""
Configuration subsystem for Guildhall.

Static configuration from environment variables (.env support), validated
once on import.

Usage
-----
```python
from guildhall.core.config import Config

if Config.is_production():
    ...
summary = Config.get_config_summary()
```
"""

from guildhall.core.config.config import Config, Environment

__all__ = ["Config", "Environment"]
