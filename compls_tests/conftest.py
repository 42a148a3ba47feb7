import logging
import os

import pytest
import structlog

from compls.conf.get_settings import CONFIG_YAML_ENV_VAR, reset_global_settings

# debug events from the codec are not interesting in test output
structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.INFO))

os.environ.pop(CONFIG_YAML_ENV_VAR, None)


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_global_settings()
    yield
    reset_global_settings()
