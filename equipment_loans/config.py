from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path

# Get the project directory (parent of the package directory)
PROJECT_DIR = Path(__file__).parent.parent
ENV_FILE = PROJECT_DIR / ".env"

DEFAULT_CATEGORIES = [
    "Laptop",
    "Desktop computer",
    "Screen/Monitor",
    "Keyboard",
    "Mouse",
    "Headset",
    "Webcam",
    "Tablet",
    "Smartphone",
    "Printer",
    "Scanner",
    "Projector",
    "Cable/Adapter",
    "External hard drive",
    "Other IT equipment",
]

class Settings(BaseSettings):
    # Server settings
    app_name: str = "Equipment Loan Tracker"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    
    # Local clock used for borrow/return timestamps (pytz zone name)
    timezone: str = "Europe/Paris"
    
    # Export file naming: <basename>_<YYYY-MM-DD>.json
    snapshot_basename: str = "gestion_materiel"
    history_basename: str = "historique_emprunts"
    
    # Display labels for dangling references
    unknown_user_label: str = "Unknown user"
    unknown_material_label: str = "Unknown material"
    
    # Categories offered when registering a material
    material_categories: List[str] = DEFAULT_CATEGORIES
    
    class Config:
        env_file = str(ENV_FILE) if ENV_FILE.exists() else ".env"
        case_sensitive = False

settings = Settings()
