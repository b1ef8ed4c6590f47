# Folder in charge of the vendor cloud API interactions
from bambu_cloud.adapters.bambu.bambu import BambuCloud
from bambu_cloud.adapters.bambu.client import Bambu_APIClient

__all__ = ["BambuCloud", "Bambu_APIClient"]
