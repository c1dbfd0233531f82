import os

from jsonexport.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['JSONEXPORT_CONFIG_YAML'] = os.environ.get('JSONEXPORT_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
