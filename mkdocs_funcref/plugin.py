"""
MkDocs plugin that writes the pipeline function reference partials.

The partials are generated in ``on_config``, before MkDocs collects the
documentation files, so pages importing them see the current catalog.
"""

from __future__ import annotations

import logging
import os

from mkdocs.config import config_options
from mkdocs.config.base import Config as MkDocsConfig
from mkdocs.plugins import BasePlugin

from .catalog import FUNCTIONS
from .generator import generate
from .naming import DEFAULT_PARTIALS_DIR
from .writer import FragmentWriter

log = logging.getLogger("mkdocs.plugins.funcref")


class FuncRefConfig(MkDocsConfig):
    enabled = config_options.Type(bool, default=True)
    output_dir = config_options.Type(str, default=DEFAULT_PARTIALS_DIR)


class FuncRefPlugin(BasePlugin[FuncRefConfig]):

    def __init__(self):
        super().__init__()
        self.functions = FUNCTIONS
        self.result = None

    def _output_dir(self, config_dir):
        out = self.config["output_dir"]
        if not os.path.isabs(out):
            out = os.path.normpath(os.path.join(config_dir, out))
        return out

    def on_config(self, config, **kwargs):
        if not self.config["enabled"]:
            log.info("funcref: disabled, skipping partial generation")
            return config

        config_dir = os.path.dirname(config.get("config_file_path", "") or "") or os.getcwd()
        out = self._output_dir(config_dir)
        self.result = generate(self.functions, out, FragmentWriter())
        return config
