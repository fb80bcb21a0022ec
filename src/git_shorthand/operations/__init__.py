from git_shorthand.operations.config import (
    BranchConfig,
    BranchConfigStore,
    default_config_path,
)
