"""Static copy for the EcoMimic 3.0 landing page.

Everything here is plain data; the Dash layout in ``ui`` decides how it looks.
"""
from __future__ import annotations

from dataclasses import dataclass, field

PRODUCT_NAME = "EcoMimic 3.0"
PRODUCT_TAGLINE = "多模态仿生式智能水族箱"
COMPANY_NAME = "EcoMimic Labs"


@dataclass(frozen=True)
class NavLink:
    label: str
    anchor: str


@dataclass(frozen=True)
class StatItem:
    label: str
    value: str
    sub: str = ""


@dataclass(frozen=True)
class FeatureItem:
    icon: str
    title: str
    body: str


@dataclass(frozen=True)
class SeriesTab:
    value: str
    label: str


@dataclass(frozen=True)
class ModelCard:
    series: str
    icon: str
    title: str
    summary: str
    bullets: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ConsoleSwitch:
    name: str
    icon: str
    label: str
    default: bool = True


@dataclass(frozen=True)
class SpecRow:
    category: str
    param: str
    desc: str


@dataclass(frozen=True)
class TimelineEntry:
    title: str
    body: str
    badge: str


@dataclass(frozen=True)
class FaqItem:
    value: str
    question: str
    answer: str


NAV_LINKS: tuple[NavLink, ...] = (
    NavLink("功能", "features"),
    NavLink("款式", "models"),
    NavLink("控制台", "console"),
    NavLink("规格", "specs"),
    NavLink("FAQ", "faq"),
)

HERO_TITLE = "游动即产氧，"
HERO_TITLE_ACCENT = "零门槛的智能水族"
HERO_SUBTITLE = "集 AI 视觉、IoT 与“仿生血液”产氧于一体：自主巡航清洁，精准水质调控，AR 第一视角交互，元宇宙虚实同步。"

HERO_STATS: tuple[StatItem, ...] = (
    StatItem("AI算力", "6 TOPS", "RK3588S NPU"),
    StatItem("仿生关节", "5 段", "亚鲹式推进"),
    StatItem("无人化运维", "7×24h", "自动巡航/回充"),
)

HERO_HIGHLIGHTS: tuple[tuple[str, str], ...] = (
    ("✦", "“仿生血液”电化学产氧，静音高效"),
    ("⛨", "AI 健康监测与异常预警"),
    ("⚡", "低电量自动返航无线充电"),
    ("✋", "手势/APP 多模态交互"),
    ("🛰", "数字孪生 & 元宇宙同步"),
)

FEATURES: tuple[FeatureItem, ...] = (
    FeatureItem("〰", "游动即产氧", "基于碘化锌液流电池的“仿生血液”，边游动边产氧，微气泡快速溶解，维持理想溶氧。"),
    FeatureItem("AI", "AI 生态管理", "多传感融合 + 视觉识别，自动调控温度、pH、DO、浊度与光照，持续学习优化参数。"),
    FeatureItem("AR", "AR 第一视角", "鱼眼高清摄像头 + 电子云台，实现沉浸式水下漫游与远程陪伴。"),
    FeatureItem("↻", "自主巡航清洁", "微型刷毛/吸附装置边巡航边清洁，悬浮颗粒带回基站处理。"),
    FeatureItem("⚡", "自动返航回充", "低电量触发视觉/信标导航，精准对接≥15W 无线充电基站。"),
    FeatureItem("✋", "多模态交互", "APP 精细操控 + 手势跟随 + 场景联动（灯光/投喂），自然流畅。"),
    FeatureItem("↗", "智慧养护建议", "长期数据学习，按鱼种与季节生成个性化策略与健康报告。"),
    FeatureItem("⛨", "安全巡逻预警", "识别干烧/脱落/异常波动/异物，声光与 App 双通道告警。"),
    FeatureItem("▦", "缸内动态造景", "3D 扫描 + 点云分析，识别藻类与覆盖率，生成造景建议。"),
)

SERIES_TABS: tuple[SeriesTab, ...] = (
    SeriesTab("stardust", "星辰系列"),
    SeriesTab("metascape", "元境系列"),
)
DEFAULT_SERIES = "stardust"

MODEL_CARDS: tuple[ModelCard, ...] = (
    ModelCard(
        "stardust",
        "⚡",
        "星辰·驭水",
        "裸露金属管线与动力结构，强调驾驭感与性能张力。",
        ("球形/圆角矩形舱体，高透超白玻璃", "操控增强：急速冲刺与灵巧闪避", "桌面深海探索舱美学"),
    ),
    ModelCard(
        "stardust",
        "▣",
        "星辰·潜望",
        "完整球形视窗，沉浸式静谧观测体验，适合长时间观赏。",
        ("深海观测站语言，工业科技美学", "超广域 360° 视野", "适配客厅/办公室陈设"),
    ),
    ModelCard(
        "metascape",
        "▯",
        "元境·蔚蓝",
        "柔和赛博光效 + 磨砂舱体，与 VR/AR/元宇宙无缝联动。",
        ("数字资产化的“虚实共生鱼缸”", "社交分享与远程陪伴", "Z 世代潮玩定位"),
    ),
)

CONSOLE_SWITCHES: tuple[ConsoleSwitch, ...] = (
    ConsoleSwitch("ar", "AR", "AR/第一视角"),
    ConsoleSwitch("auto_clean", "↻", "自主清洁"),
    ConsoleSwitch("feed", "◎", "智能投喂"),
    ConsoleSwitch("metaverse", "🛰", "元宇宙同步"),
)

CONSOLE_ACTIONS: tuple[str, ...] = ("一键投饵", "补光/造景", "排水/换水")
PHONE_ACTIONS: tuple[str, ...] = ("拍照", "录像", "灯光")

ARCHITECTURE_SUMMARY = "GD32H7（实时控制） + RK3588S（AI/应用） + ESP32‑S3（仿生鱼端）。"
ARCHITECTURE: tuple[FeatureItem, ...] = (
    FeatureItem("AI", "RK3588S 应用与视觉引擎", "8 核 CPU + 6 TOPS NPU，承担视觉识别/多模态推理/云端通讯与人机界面。"),
    FeatureItem("◴", "GD32H7 实时控制", "可靠读取 pH/DO/ORP/TDS/浊度/液位/温度等传感并控制泵阀加热制冷等执行器。"),
    FeatureItem("⚡", "ESP32‑S3 仿生鱼端", "低功耗通信 + 机体姿态/动力控制 + 返航定位与“仿生血液”产氧调度。"),
)

SPEC_TABLE_HEADER: tuple[str, str, str] = ("类别", "参数", "说明")
SPEC_ROWS: tuple[SpecRow, ...] = (
    SpecRow("水族箱", "150×60×60 cm / ~540 L", "超白玻璃 / 亚克力，360° 广域视野"),
    SpecRow("仿生鱼", "长度 30 cm / 5 段关节", "亚鲹式推进，~1.0 BL/s"),
    SpecRow("AI 核心", "RK3588S • NPU 6 TOPS", "视觉/行为/健康识别"),
    SpecRow("实时控制", "GD32H7 MCU", "多传感融合与闭环调节"),
    SpecRow("通信", "Wi‑Fi 6 / BLE / 以太网", "云端/APP/本地 HMI"),
    SpecRow("供氧", "“仿生血液”电化学", "碘化锌液流 + 微气泡扩散"),
    SpecRow("回充", "≥15W 无线充电", "自动返航/对位充电"),
    SpecRow("HMI", "7\" IPS 触控屏", "参数/预警/一键维护"),
)

TIMELINE: tuple[TimelineEntry, ...] = (
    TimelineEntry("V1.0 机械仿生", "多关节尾鳍，摆尾姿态接近真实；续航与噪声仍有短板。", "原型探索"),
    TimelineEntry("V2.0 视感觉醒", "机器视觉 + 手势跟随；水质传感接入；首代磁吸充电桩。", "感知-预警"),
    TimelineEntry("V3.0 生态共生", "“游动即产氧” + 自主运维闭环 + AR/元宇宙沉浸交互。", "无人化运维"),
)

CONTACT_TITLE = "预约线下演示 / 获取报价"
CONTACT_BLURB = "提交信息，我们将在 1 个工作日内联系您，提供场景化方案建议与试用名额。"
CONTACT_PERKS: tuple[tuple[str, str], ...] = (
    ("⛨", "企业/高校/商业空间定制支持"),
    ("☁", "开放 API 与数字孪生接口"),
    ("◷", "原型机交付周期可议"),
)
CONTACT_SCENES: tuple[str, ...] = ("家庭高端观赏", "商业空间装置", "科普/教育", "科研平台", "数字疗愈", "其他")

FAQ_ITEMS: tuple[FaqItem, ...] = (
    FaqItem("q1", "“仿生血液”产氧是否需要额外维护？", "日常仅需在系统提示时补充电解液并进行安全检查；AI 将按溶氧传感反馈自动调节产氧速率。"),
    FaqItem("q2", "停电或断网时系统如何工作？", "本地 MCU 维持基础生命线（温度/供氧/水位）闭环；联网恢复后自动同步到云端与 App。"),
    FaqItem("q3", "是否支持第三方开发？", "提供开放 API、WebSocket 实时流与数字孪生接口，便于科研与创客扩展。"),
)

FOOTER_NOTE = "本页面为演示站点：包含交互原型、数据示例与占位视觉。"


def model_cards_for_series(series: str | None) -> list[ModelCard]:
    return [card for card in MODEL_CARDS if card.series == series]
