from kinematic_ssm.utils.config import (
    KinematicsConfig,
    NumericsConfig,
    apply_config,
    get_config,
    load_config,
)

__all__ = [
    "KinematicsConfig",
    "NumericsConfig",
    "apply_config",
    "get_config",
    "load_config",
]
