"""Configuration loader for the smart chunking engine."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from smartchunk.models.structure import DocumentType

DEFAULT_MAX_CHUNK_SIZE = 500
DEFAULT_OVERLAP = 50


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Smart Chunk"
    version: str = "1.0.0"
    log_level: str = "INFO"


class ChunkingConfig(BaseModel):
    """Per-call chunking options.

    ``max_chunk_size`` and ``overlap`` stay ``None`` unless the caller
    supplies them, so explicit values can be told apart from defaults
    when the effective configuration is resolved.
    """

    model_config = ConfigDict(frozen=True)

    max_chunk_size: int | None = None
    overlap: int | None = None
    preserve_structure: bool = True
    auto_detect_document_type: bool = True


class DocumentTypeConfig(BaseModel):
    """Chunk sizing profile for one document type."""

    model_config = ConfigDict(frozen=True)

    max_chunk_size: int
    overlap: int
    description: str = ""


DOCUMENT_TYPE_CONFIGS: dict[DocumentType, DocumentTypeConfig] = {
    "faq": DocumentTypeConfig(max_chunk_size=400, overlap=30, description="Short Q&A units"),
    "technical": DocumentTypeConfig(
        max_chunk_size=600, overlap=80, description="Code and explanation kept together"
    ),
    "legal": DocumentTypeConfig(
        max_chunk_size=500, overlap=100, description="Clause units with wider context"
    ),
    "general": DocumentTypeConfig(
        max_chunk_size=DEFAULT_MAX_CHUNK_SIZE, overlap=DEFAULT_OVERLAP, description="Balanced default"
    ),
}


class QualityConfig(BaseModel):
    """Review policy thresholds applied to scored chunks."""

    auto_approve_threshold: int = 85
    low_quality_threshold: int = 50
    short_chunk_length: int = 100
    long_chunk_length: int = 800
    preview_length: int = 200


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    chunking: ChunkingConfig = Field(default_factory=ChunkingConfig)
    document_types: dict[DocumentType, DocumentTypeConfig] = Field(
        default_factory=lambda: dict(DOCUMENT_TYPE_CONFIGS)
    )
    quality: QualityConfig = Field(default_factory=QualityConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Document type profiles given in the file replace the built-in ones
    per type; types the file does not mention keep their defaults.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file, encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

    document_types = {**DOCUMENT_TYPE_CONFIGS, **(yaml_data.pop("document_types", None) or {})}
    config = AppConfig(**yaml_data, document_types=document_types)

    # Override log level from environment
    log_level = os.getenv("SMARTCHUNK_LOG_LEVEL")
    if log_level:
        config.app.log_level = log_level.upper()

    return config
