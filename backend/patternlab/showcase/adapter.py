"""
Adapter Pattern

A Lightning phone is made usable through the MicroUsb interface by wrapping it
in LightningToMicroUsbAdapter. The adapter keeps no connector state of its
own; it translates each call to the wrapped phone.
"""

from abc import ABC, abstractmethod
import logging

from patternlab.decorators.traced import traced

logger = logging.getLogger(__name__)


class LightningPhone(ABC):
    @abstractmethod
    def recharge(self) -> None:
        ...

    @abstractmethod
    def use_lightning(self) -> None:
        ...


class MicroUsbPhone(ABC):
    @abstractmethod
    def recharge(self) -> None:
        ...

    @abstractmethod
    def use_micro_usb(self) -> None:
        ...


class IPhone(LightningPhone):
    def __init__(self):
        self.connector = False

    def use_lightning(self) -> None:
        self.connector = True
        print("Lightning connected")

    def recharge(self) -> None:
        if not self.connector:
            logger.debug("Recharge refused: Lightning connector not engaged")
            print("Connect Lightning first")
            return
        print("Recharge started")
        print("Recharge finished")


class Android(MicroUsbPhone):
    def __init__(self):
        self.connector = False

    def use_micro_usb(self) -> None:
        self.connector = True
        print("MicroUsb connected")

    def recharge(self) -> None:
        if not self.connector:
            logger.debug("Recharge refused: MicroUsb connector not engaged")
            print("Connect MicroUsb first")
            return
        print("Recharge started")
        print("Recharge finished")


class LightningToMicroUsbAdapter(MicroUsbPhone):
    """
    Exposes a LightningPhone through the MicroUsbPhone interface.

    The wrapped phone is borrowed: the adapter never replaces or copies it.
    """

    def __init__(self, lightning_phone: LightningPhone):
        self._lightning_phone = lightning_phone

    @property
    def wrapped(self) -> LightningPhone:
        return self._lightning_phone

    def use_micro_usb(self) -> None:
        print("MicroUsb connected")
        self._lightning_phone.use_lightning()

    def recharge(self) -> None:
        self._lightning_phone.recharge()


def recharge_micro_usb_phone(phone: MicroUsbPhone) -> None:
    phone.use_micro_usb()
    phone.recharge()


def recharge_lightning_phone(phone: LightningPhone) -> None:
    phone.use_lightning()
    phone.recharge()


@traced(label="adapter")
def demonstrate() -> None:
    print("Recharging android with MicroUsb")
    recharge_micro_usb_phone(Android())

    print("Recharging iPhone with Lightning")
    recharge_lightning_phone(IPhone())

    print("Recharging iPhone with MicroUsb")
    recharge_micro_usb_phone(LightningToMicroUsbAdapter(IPhone()))
