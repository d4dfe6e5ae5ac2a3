import yaml


class YamlLoader:
    @staticmethod
    def load(path: str) -> dict | None:
        with open(path, "r") as file:
            return yaml.safe_load(file)
