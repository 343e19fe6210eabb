"""
Error types raised by the CharSense engines
"""


class InvalidInput(ValueError):
    """Raised when an engine receives input outside its contract"""


class UnknownDevice(LookupError):
    """Raised when a device id is not present in the location registry"""

    def __init__(self, device_id: str):
        super().__init__(f"Device '{device_id}' not found")
        self.device_id = device_id
