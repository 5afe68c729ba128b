"""
Utility Package

- env_utils: .env encoding normalization before python-dotenv loads it
- color_utils: hex/RGB conversion and color averaging
- logging_config: unified console/file logging setup
"""
