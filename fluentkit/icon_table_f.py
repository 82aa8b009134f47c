"""Segoe Fluent icon code points in the U+F000 to U+F8FF range.

Maps each icon name to its code point, in code point order.
"""

__all__ = ["ICONS_F"]

ICONS_F: dict[str, int] = {
    "KnowledgeArticle": 0xf000,
    "Relationship": 0xf003,
    "ZipFolder": 0xf012,
    "DefaultAPN": 0xf080,
    "UserAPN": 0xf081,
    "DoublePinyin": 0xf085,
    "BlueLight": 0xf08c,
    "CaretSolidLeft": 0xf08d,
    "CaretSolidDown": 0xf08e,
    "CaretSolidRight": 0xf08f,
    "CaretSolidUp": 0xf090,
    "ButtonA": 0xf093,
    "ButtonB": 0xf094,
    "ButtonY": 0xf095,
    "ButtonX": 0xf096,
    "ArrowUp8": 0xf0ad,
    "ArrowDown8": 0xf0ae,
    "ArrowRight8": 0xf0af,
    "ArrowLeft8": 0xf0b0,
    "QuarentinedItems": 0xf0b2,
    "QuarentinedItemsMirrored": 0xf0b3,
    "Protractor": 0xf0b4,
    "ChecklistMirrored": 0xf0b5,
    "StatusCircle7": 0xf0b6,
    "StatusCheckmark7": 0xf0b7,
    "StatusErrorCircle7": 0xf0b8,
    "Connected": 0xf0b9,
    "PencilFill": 0xf0c6,
    "CalligraphyFill": 0xf0c7,
    "QuarterStarLeft": 0xf0ca,
    "QuarterStarRight": 0xf0cb,
    "ThreeQuarterStarLeft": 0xf0cc,
    "ThreeQuarterStarRight": 0xf0cd,
    "QuietHoursBadge12": 0xf0ce,
    "BackMirrored": 0xf0d2,
    "ForwardMirrored": 0xf0d3,
    "ChromeBackContrast": 0xf0d5,
    "ChromeBackContrastMirrored": 0xf0d6,
    "ChromeBackToWindowContrast": 0xf0d7,
    "ChromeFullScreenContrast": 0xf0d8,
    "GridView": 0xf0e2,
    "ClipboardList": 0xf0e3,
    "ClipboardListMirrored": 0xf0e4,
    "OutlineQuarterStarLeft": 0xf0e5,
    "OutlineQuarterStarRight": 0xf0e6,
    "OutlineHalfStarLeft": 0xf0e7,
    "OutlineHalfStarRight": 0xf0e8,
    "OutlineThreeQuarterStarLeft": 0xf0e9,
    "OutlineThreeQuarterStarRight": 0xf0ea,
    "SpatialVolume0": 0xf0eb,
    "SpatialVolume1": 0xf0ec,
    "SpatialVolume2": 0xf0ed,
    "SpatialVolume3": 0xf0ee,
    "ApplicationGuard": 0xf0ef,
    "OutlineStarLeftHalf": 0xf0f7,
    "OutlineStarRightHalf": 0xf0f8,
    "ChromeAnnotateContrast": 0xf0f9,
    "DefenderBadge12": 0xf0fb,
    "DetachablePC": 0xf103,
    "LeftStick": 0xf108,
    "RightStick": 0xf109,
    "TriggerLeft": 0xf10a,
    "TriggerRight": 0xf10b,
    "BumperLeft": 0xf10c,
    "BumperRight": 0xf10d,
    "Dpad": 0xf10e,
    "EnglishPunctuation": 0xf110,
    "ChinesePunctuation": 0xf111,
    "HMD": 0xf119,
    "CtrlSpatialRight": 0xf11b,
    "PaginationDotOutline10": 0xf126,
    "PaginationDotSolid10": 0xf127,
    "StrokeErase2": 0xf128,
    "SmallErase": 0xf129,
    "LargeErase": 0xf12a,
    "FolderHorizontal": 0xf12b,
    "MicrophoneListening": 0xf12e,
    "StatusExclamationCircle7": 0xf12f,
    "Video360": 0xf131,
    "GiftboxOpen": 0xf133,
    "StatusCircleOuter": 0xf136,
    "StatusCircleInner": 0xf137,
    "StatusCircleRing": 0xf138,
    "StatusTriangleOuter": 0xf139,
    "StatusTriangleInner": 0xf13a,
    "StatusTriangleExclamation": 0xf13b,
    "StatusCircleExclamation": 0xf13c,
    "StatusCircleErrorX": 0xf13d,
    "StatusCircleCheckmark": 0xf13e,
    "StatusCircleInfo": 0xf13f,
    "StatusCircleBlock": 0xf140,
    "StatusCircleBlock2": 0xf141,
    "StatusCircleQuestionMark": 0xf142,
    "StatusCircleSync": 0xf143,
    "Dial1": 0xf146,
    "Dial2": 0xf147,
    "Dial3": 0xf148,
    "Dial4": 0xf149,
    "Dial5": 0xf14a,
    "Dial6": 0xf14b,
    "Dial7": 0xf14c,
    "Dial8": 0xf14d,
    "Dial9": 0xf14e,
    "Dial10": 0xf14f,
    "Dial11": 0xf150,
    "Dial12": 0xf151,
    "Dial13": 0xf152,
    "Dial14": 0xf153,
    "Dial15": 0xf154,
    "Dial16": 0xf155,
    "DialShape1": 0xf156,
    "DialShape2": 0xf157,
    "DialShape3": 0xf158,
    "DialShape4": 0xf159,
    "ClosedCaptionsInternational": 0xf15f,
    "TollSolid": 0xf161,
    "TrafficCongestionSolid": 0xf163,
    "ExploreContentSingle": 0xf164,
    "CollapseContent": 0xf165,
    "CollapseContentSingle": 0xf166,
    "InfoSolid": 0xf167,
    "GroupList": 0xf168,
    "CaretBottomRightSolidCenter8": 0xf169,
    "ProgressRingDots": 0xf16a,
    "Checkbox14": 0xf16b,
    "CheckboxComposite14": 0xf16c,
    "CheckboxIndeterminateCombo14": 0xf16d,
    "CheckboxIndeterminateCombo": 0xf16e,
    "StatusPause7": 0xf175,
    "CharacterAppearance": 0xf17f,
    "Lexicon": 0xf180,
    "ScreenTime": 0xf182,
    "HeadlessDevice": 0xf191,
    "NetworkSharing": 0xf193,
    "EyeGaze": 0xf19d,
    "ToggleLeft": 0xf19e,
    "ToggleRight": 0xf19f,
    "WindowsInsider": 0xf1ad,
    "ChromeSwitch": 0xf1cb,
    "ChromeSwitchContast": 0xf1cc,
    "StatusCheckmark": 0xf1d8,
    "StatusCheckmarkLeft": 0xf1d9,
    "KeyboardLeftAligned": 0xf20c,
    "KeyboardRightAligned": 0xf20d,
    "KeyboardSettings": 0xf210,
    "NetworkPhysical": 0xf211,
    "IOT": 0xf22c,
    "UnknownMirrored": 0xf22e,
    "ViewDashboard": 0xf246,
    "ExploitProtectionSettings": 0xf259,
    "KeyboardNarrow": 0xf260,
    "Keyboard12Key": 0xf261,
    "KeyboardDock": 0xf26b,
    "KeyboardUndock": 0xf26c,
    "KeyboardLeftDock": 0xf26d,
    "KeyboardRightDock": 0xf26e,
    "Ear": 0xf270,
    "PointerHand": 0xf271,
    "Bullseye": 0xf272,
    "DocumentApproval": 0xf28b,
    "LocaleLanguage": 0xf2b7,
    "PassiveAuthentication": 0xf32a,
    "ColorSolid": 0xf354,
    "NetworkOffline": 0xf384,
    "NetworkConnected": 0xf385,
    "NetworkConnectedCheckmark": 0xf386,
    "SignOut": 0xf3b1,
    "StatusInfo": 0xf3cc,
    "StatusInfoLeft": 0xf3cd,
    "NearbySharing": 0xf3e2,
    "CtrlSpatialLeft": 0xf3e7,
    "InteractiveDashboard": 0xf404,
    "DeclineCall": 0xf405,
    "ClippingTool": 0xf406,
    "RectangularClipping": 0xf407,
    "FreeFormClipping": 0xf408,
    "CopyTo": 0xf413,
    "IDBadge": 0xf427,
    "DynamicLock": 0xf439,
    "PenTips": 0xf45e,
    "PenTipsMirrored": 0xf45f,
    "HWPJoin": 0xf460,
    "HWPInsert": 0xf461,
    "HWPStrikeThrough": 0xf462,
    "HWPScratchOut": 0xf463,
    "HWPSplit": 0xf464,
    "HWPNewLine": 0xf465,
    "HWPOverwrite": 0xf466,
    "MobWifiWarning1": 0xf473,
    "MobWifiWarning2": 0xf474,
    "MobWifiWarning3": 0xf475,
    "MobWifiWarning4": 0xf476,
    "MicLocationCombo": 0xf47f,
    "Globe2": 0xf49a,
    "SpecialEffectSize": 0xf4a5,
    "GIF": 0xf4a9,
    "Sticker2": 0xf4aa,
    "SurfaceHubSelected": 0xf4be,
    "HoloLensSelected": 0xf4bf,
    "Earbud": 0xf4c0,
    "MixVolumes": 0xf4c3,
    "Safe": 0xf540,
    "LaptopSecure": 0xf552,
    "PrintDefault": 0xf56d,
    "PageMirrored": 0xf56e,
    "LandscapeOrientationMirrored": 0xf56f,
    "ColorOff": 0xf570,
    "PrintAllPages": 0xf571,
    "PrintCustomRange": 0xf572,
    "PageMarginPortraitNarrow": 0xf573,
    "PageMarginPortraitNormal": 0xf574,
    "PageMarginPortraitModerate": 0xf575,
    "PageMarginPortraitWide": 0xf576,
    "PageMarginLandscapeNarrow": 0xf577,
    "PageMarginLandscapeNormal": 0xf578,
    "PageMarginLandscapeModerate": 0xf579,
    "PageMarginLandscapeWide": 0xf57a,
    "CollateLandscape": 0xf57b,
    "CollatePortrait": 0xf57c,
    "CollatePortraitSeparated": 0xf57d,
    "DuplexLandscapeOneSided": 0xf57e,
    "DuplexLandscapeOneSidedMirrored": 0xf57f,
    "DuplexLandscapeTwoSidedLongEdge": 0xf580,
    "DuplexLandscapeTwoSidedLongEdgeMirrored": 0xf581,
    "DuplexLandscapeTwoSidedShortEdge": 0xf582,
    "DuplexLandscapeTwoSidedShortEdgeMirrored": 0xf583,
    "DuplexPortraitOneSided": 0xf584,
    "DuplexPortraitOneSidedMirrored": 0xf585,
    "DuplexPortraitTwoSidedLongEdge": 0xf586,
    "DuplexPortraitTwoSidedLongEdgeMirrored": 0xf587,
    "DuplexPortraitTwoSidedShortEdge": 0xf588,
    "DuplexPortraitTwoSidedShortEdgeMirrored": 0xf589,
    "PPSOneLandscape": 0xf58a,
    "PPSTwoLandscape": 0xf58b,
    "PPSTwoPortrait": 0xf58c,
    "PPSFourLandscape": 0xf58d,
    "PPSFourPortrait": 0xf58e,
    "HolePunchOff": 0xf58f,
    "HolePunchPortraitLeft": 0xf590,
    "HolePunchPortraitRight": 0xf591,
    "HolePunchPortraitTop": 0xf592,
    "HolePunchPortraitBottom": 0xf593,
    "HolePunchLandscapeLeft": 0xf594,
    "HolePunchLandscapeRight": 0xf595,
    "HolePunchLandscapeTop": 0xf596,
    "HolePunchLandscapeBottom": 0xf597,
    "StaplingOff": 0xf598,
    "StaplingPortraitTopLeft": 0xf599,
    "StaplingPortraitTopRight": 0xf59a,
    "StaplingPortraitBottomRight": 0xf59b,
    "StaplingPortraitTwoLeft": 0xf59c,
    "StaplingPortraitTwoRight": 0xf59d,
    "StaplingPortraitTwoTop": 0xf59e,
    "StaplingPortraitTwoBottom": 0xf59f,
    "StaplingPortraitBookBinding": 0xf5a0,
    "StaplingLandscapeTopLeft": 0xf5a1,
    "StaplingLandscapeTopRight": 0xf5a2,
    "StaplingLandscapeBottomLeft": 0xf5a3,
    "StaplingLandscapeBottomRight": 0xf5a4,
    "StaplingLandscapeTwoLeft": 0xf5a5,
    "StaplingLandscapeTwoRight": 0xf5a6,
    "StaplingLandscapeTwoTop": 0xf5a7,
    "StaplingLandscapeTwoBottom": 0xf5a8,
    "StaplingLandscapeBookBinding": 0xf5a9,
    "StatusDataTransferRoaming": 0xf5aa,
    "MobSIMError": 0xf5ab,
    "CollateLandscapeSeparated": 0xf5ac,
    "PPSOnePortrait": 0xf5ad,
    "StaplingPortraitBottomLeft": 0xf5ae,
    "PlaySolid": 0xf5b0,
    "RepeatOff": 0xf5e7,
    "Set": 0xf5ed,
    "SetSolid": 0xf5ee,
    "FuzzyReading": 0xf5ef,
    "VerticalBattery0": 0xf5f2,
    "VerticalBattery1": 0xf5f3,
    "VerticalBattery2": 0xf5f4,
    "VerticalBattery3": 0xf5f5,
    "VerticalBattery4": 0xf5f6,
    "VerticalBattery5": 0xf5f7,
    "VerticalBattery6": 0xf5f8,
    "VerticalBattery7": 0xf5f9,
    "VerticalBattery8": 0xf5fa,
    "VerticalBattery9": 0xf5fb,
    "VerticalBattery10": 0xf5fc,
    "VerticalBatteryCharging0": 0xf5fd,
    "VerticalBatteryCharging1": 0xf5fe,
    "VerticalBatteryCharging2": 0xf5ff,
    "VerticalBatteryCharging3": 0xf600,
    "VerticalBatteryCharging4": 0xf601,
    "VerticalBatteryCharging5": 0xf602,
    "VerticalBatteryCharging6": 0xf603,
    "VerticalBatteryCharging7": 0xf604,
    "VerticalBatteryCharging8": 0xf605,
    "VerticalBatteryCharging9": 0xf606,
    "VerticalBatteryCharging10": 0xf607,
    "VerticalBatteryUnknown": 0xf608,
    "SIMError": 0xf618,
    "SIMMissing": 0xf619,
    "SIMLock": 0xf61a,
    "eSIM": 0xf61b,
    "eSIMNoProfile": 0xf61c,
    "eSIMLocked": 0xf61d,
    "eSIMBusy": 0xf61e,
    "NoiseCancelation": 0xf61f,
    "NoiseCancelationOff": 0xf620,
    "MusicSharing": 0xf623,
    "MusicSharingOff": 0xf624,
    "CircleShapeSolid": 0xf63c,
    "WifiCallBars": 0xf657,
    "WifiCall0": 0xf658,
    "WifiCall1": 0xf659,
    "WifiCall2": 0xf65a,
    "WifiCall3": 0xf65b,
    "WifiCall4": 0xf65c,
    "CHTLanguageBar": 0xf69e,
    "ComposeMode": 0xf6a9,
    "ExpressiveInputEntry": 0xf6b8,
    "EmojiTabMoreSymbols": 0xf6ba,
    "WebSearch": 0xf6fa,
    "Kiosk": 0xf712,
    "RTTLogo": 0xf714,
    "VoiceCall": 0xf715,
    "GoToMessage": 0xf716,
    "ReturnToCall": 0xf71a,
    "StartPresenting": 0xf71c,
    "StopPresenting": 0xf71d,
    "ProductivityMode": 0xf71e,
    "SetHistoryStatus": 0xf738,
    "SetHistoryStatus2": 0xf739,
    "Keyboardsettings20": 0xf73d,
    "OneHandedRight20": 0xf73e,
    "OneHandedLeft20": 0xf73f,
    "Split20": 0xf740,
    "Full20": 0xf741,
    "Handwriting20": 0xf742,
    "ChevronLeft20": 0xf743,
    "ChevronLeft32": 0xf744,
    "ChevronRight20": 0xf745,
    "ChevronRight32": 0xf746,
    "Event12": 0xf763,
    "MicOff2": 0xf781,
    "DeliveryOptimization": 0xf785,
    "CancelMedium": 0xf78a,
    "SearchMedium": 0xf78b,
    "AcceptMedium": 0xf78c,
    "RevealPasswordMedium": 0xf78d,
    "DeleteWord": 0xf7ad,
    "DeleteWordFill": 0xf7ae,
    "DeleteLines": 0xf7af,
    "DeleteLinesFill": 0xf7b0,
    "InstertWords": 0xf7b1,
    "InstertWordsFill": 0xf7b2,
    "JoinWords": 0xf7b3,
    "JoinWordsFill": 0xf7b4,
    "OverwriteWords": 0xf7b5,
    "OverwriteWordsFill": 0xf7b6,
    "AddNewLine": 0xf7b7,
    "AddNewLineFill": 0xf7b8,
    "OverwriteWordsKorean": 0xf7b9,
    "OverwriteWordsFillKorean": 0xf7ba,
    "EducationIcon": 0xf7bb,
    "WindowSnipping": 0xf7ed,
    "VideoCapture": 0xf7ee,
    "StatusSecured": 0xf809,
    "NarratorApp": 0xf83b,
    "PowerButtonUpdate": 0xf83d,
    "RestartUpdate": 0xf83e,
    "UpdateStatusDot": 0xf83f,
    "Eject": 0xf847,
    "Spelling": 0xf87b,
    "SpellingKorean": 0xf87c,
    "SpellingSerbian": 0xf87d,
    "SpellingChinese": 0xf87e,
    "FolderSelect": 0xf89a,
    "SmartScreen": 0xf8a5,
    "ExploitProtection": 0xf8a6,
    "AddBold": 0xf8aa,
    "SubtractBold": 0xf8ab,
    "BackSolidBold": 0xf8ac,
    "ForwardSolidBold": 0xf8ad,
    "PauseBold": 0xf8ae,
    "ClickSolid": 0xf8af,
    "SettingsSolid": 0xf8b0,
    "MicrophoneSolidBold": 0xf8b1,
    "SpeechSolidBold": 0xf8b2,
    "ClickedOutLoudSolidBold": 0xf8b3,
}