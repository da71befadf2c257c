"""Adapter pattern: camera vendors exposed through one common camera interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _emit(message: str) -> str:
    print(message)
    return message


class NikonCamera:
    """Adaptee with a vendor-specific interface."""

    is_open: bool = False
    exposure_settings_open: bool = False

    def open_nikon_camera(self) -> str:
        """Switch the camera on and report it."""
        self.is_open = True
        return _emit("尼康相机：打开相机。")

    def close_nikon_camera(self) -> str:
        """Switch the camera off and report it."""
        self.is_open = False
        return _emit("尼康相机：关闭相机。")

    def open_exposure_settings(self) -> str:
        """Open the exposure settings and report it."""
        self.exposure_settings_open = True
        return _emit("尼康相机：打开曝光设置。")


class LeicaCamera:
    """Adaptee with a vendor-specific interface."""

    is_open: bool = False
    exposure_settings_open: bool = False

    def open_leica_camera(self) -> str:
        """Switch the camera on and report it."""
        self.is_open = True
        return _emit("徕卡相机：打开相机。")

    def close_leica_camera(self) -> str:
        """Switch the camera off and report it."""
        self.is_open = False
        return _emit("徕卡相机：关闭相机。")

    def open_exposure_settings(self) -> str:
        """Open the exposure settings and report it."""
        self.exposure_settings_open = True
        return _emit("徕卡相机：打开曝光设置。")


class Camera(ABC):
    """Target interface that clients use."""

    @abstractmethod
    def open_camera(self) -> str:
        """Switch the camera on."""

    @abstractmethod
    def close_camera(self) -> str:
        """Switch the camera off."""

    @abstractmethod
    def set_config(self) -> str:
        """Apply the camera's configuration."""


class CameraAdapter(Camera, NikonCamera):
    """Class adapter: inherits the Nikon interface and maps it onto Camera."""

    def open_camera(self) -> str:
        return self.open_nikon_camera()

    def close_camera(self) -> str:
        return self.close_nikon_camera()

    def set_config(self) -> str:
        return self.open_exposure_settings()


class LeicaCameraAdapter(Camera):
    """Object adapter: wraps a LeicaCamera instance and delegates to it."""

    def __init__(self) -> None:
        self._leica_camera = LeicaCamera()

    def open_camera(self) -> str:
        return self._leica_camera.open_leica_camera()

    def close_camera(self) -> str:
        return self._leica_camera.close_leica_camera()

    def set_config(self) -> str:
        return self._leica_camera.open_exposure_settings()


def main(argv: list[str] | None = None) -> int:
    """Drive a camera through the adapter: open, configure, close."""
    camera: Camera = CameraAdapter()
    camera.open_camera()
    camera.set_config()
    camera.close_camera()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())