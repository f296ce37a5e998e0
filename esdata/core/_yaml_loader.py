import json
import os

import yaml


class YamlLoader:
    @staticmethod
    def load(path: str) -> dict | list:
        with open(path, "r") as file:
            if os.path.splitext(path)[1].lower() == ".json":
                return json.load(file)
            return yaml.load(file, Loader=yaml.FullLoader)
