import torch
from typing import Optional, Union

from Base64Codec.utils.logging import get_logger


_device: Optional[torch.device] = None

def get_device(force_cpu: bool = False) -> torch.device:
    global _device

    if force_cpu:
        return torch.device('cpu')

    if _device is None:
        logger = get_logger()
        if torch.cuda.is_available():
            _device = torch.device('cuda')
            logger.info(f"CUDA GPU detected: {torch.cuda.get_device_name(0)}")
            logger.info("Decoded tensors will be placed on 'cuda'.")
        else:
            _device = torch.device('cpu')
            logger.info("CUDA GPU not detected. Using 'cpu'.")

    return _device

def resolve_device(
    device: Union[str, torch.device, None] = None,
    force_cpu: bool = False,
) -> torch.device:
    """
    Picks the device decoded tensors are placed on.

    An explicit ``device`` (name or ``torch.device``) wins; otherwise the
    auto-detected default is used, or CPU when ``force_cpu`` is set.
    """
    if device is not None:
        return torch.device(device)
    return get_device(force_cpu=force_cpu)
