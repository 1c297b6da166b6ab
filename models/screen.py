from enum import Enum

from pydantic import BaseModel


class Screen(str, Enum):
    MAIN_MENU = "menu"
    TAX_CALCULATOR = "tax"
    POLICY_PERIOD_CALCULATOR = "policy"
    AI_SUMMARIZER = "summarize"


class MenuItem(BaseModel):
    screen: Screen
    title: str
    description: str
    path: str


MENU_ITEMS: list[MenuItem] = [
    MenuItem(
        screen=Screen.TAX_CALCULATOR,
        title="ÖTV ve KDV Ayırıcı",
        description="Toplam tutar içerisinden ÖTV ve KDV'yi ayırır.",
        path="/tax",
    ),
    MenuItem(
        screen=Screen.POLICY_PERIOD_CALCULATOR,
        title="Poliçe Dönem Hesaplayıcı",
        description="Tarih aralığına göre tutarı çeyreklere dağıtır.",
        path="/policy",
    ),
    MenuItem(
        screen=Screen.AI_SUMMARIZER,
        title="AI Metin Özetleyici",
        description="Uzun bir metni yapay zeka ile özetler.",
        path="/summarize",
    ),
]
