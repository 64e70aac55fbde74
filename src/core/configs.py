import yaml

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from core.globals import CONFIGS_DIR, DEFAULT_PDF_URL


class ExtractorConfig(BaseModel):
    """
    Tunables of the section extraction engine and its document loaders.

    Values are read from ``configs/extractor_config.yaml`` when present;
    anything missing there keeps the defaults below.
    """
    file_path: Path = Field(default=CONFIGS_DIR / "extractor_config.yaml", exclude=True)

    # Max accumulated characters before extraction is cut short
    safety_ceiling: int = Field(default=50_000, ge=1)
    separator: str = " "
    # Only stop on boundaries whose section number sorts after the target
    strict_boundary: bool = False

    default_pdf_url: str = DEFAULT_PDF_URL
    download_timeout_s: float = Field(default=60.0, gt=0)
    max_download_bytes: Optional[int] = Field(default=None, ge=1)

    def exists(self) -> bool:
        return self.file_path.exists()

    def save_to_disk(self):
        config_dict = self.model_dump(mode="json")

        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        self.file_path.write_text(
            yaml.dump(config_dict, default_flow_style=False, sort_keys=False)
        )

    def read_from_disk(self) -> None:
        """Update this config instance with values from disk."""
        if not self.file_path.exists():
            raise Exception(f"{self.file_path=} does not exist")

        config_dict = yaml.safe_load(self.file_path.read_text()) or {}
        config_dict = {
            k: v for k, v in config_dict.items()
            if v is not None and k in type(self).model_fields and k != "file_path"
        }

        validated = self.model_validate({**self.model_dump(), **config_dict})
        for key in config_dict:
            setattr(self, key, getattr(validated, key))

    @classmethod
    def load(cls, file_path: Optional[Path] = None) -> "ExtractorConfig":
        config = cls() if file_path is None else cls(file_path=file_path)
        if config.exists():
            config.read_from_disk()
        return config
