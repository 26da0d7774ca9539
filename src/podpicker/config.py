"""
podpicker configuration
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from podpicker.constants import LoadBalanceMode


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "podpicker"

    # Kubernetes Configuration
    k8s_namespace: str = Field(default="default", validation_alias="K8S_NAMESPACE")
    k8s_config_path: Optional[str] = Field(
        default=None, validation_alias="K8S_CONFIG_PATH"
    )
    k8s_in_cluster: bool = Field(default=False, validation_alias="K8S_IN_CLUSTER")
    k8s_request_timeout: float = Field(
        default=30.0, validation_alias="K8S_REQUEST_TIMEOUT"
    )

    # Replica selection
    deployment: str = Field(default="", validation_alias="PODPICKER_DEPLOYMENT")
    loadbalance: LoadBalanceMode = Field(
        default=LoadBalanceMode.STICKY, validation_alias="PODPICKER_LOADBALANCE"
    )
    sticky_key: Optional[str] = Field(
        default=None, validation_alias="PODPICKER_STICKY_KEY"
    )

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_json: bool = Field(default=False, validation_alias="LOG_JSON")
    log_file: Optional[str] = Field(default=None, validation_alias="LOG_FILE")

    def get_k8s_config(self) -> dict:
        """Keyword arguments for KubernetesPodClient."""
        return {
            "namespace": self.k8s_namespace,
            "config_path": self.k8s_config_path,
            "in_cluster": self.k8s_in_cluster,
            "request_timeout": self.k8s_request_timeout,
        }

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


settings = Settings()
