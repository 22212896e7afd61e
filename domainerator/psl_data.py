# -*- coding: utf-8 -*-
# 内置的常用公共后缀子集: 通用顶级域、国家顶级域、部分二级后缀和国际化后缀。
# 运行 domainerator-update-psl 可从 https://publicsuffix.org/list/public_suffix_list.dat
# 重新生成完整列表，生成结果会覆盖本文件。

PUBLIC_SUFFIXES = {
    "ac": True,
    "ac.jp": True,
    "ac.uk": True,
    "academy": True,
    "ad": True,
    "ae": True,
    "aero": True,
    "af": True,
    "ag": True,
    "agency": True,
    "ai": True,
    "al": True,
    "am": True,
    "ao": True,
    "app": True,
    "aq": True,
    "ar": True,
    "art": True,
    "as": True,
    "asia": True,
    "at": True,
    "au": True,
    "aw": True,
    "ax": True,
    "az": True,
    "ba": True,
    "bb": True,
    "bd": True,
    "be": True,
    "bf": True,
    "bg": True,
    "bh": True,
    "bi": True,
    "biz": True,
    "bj": True,
    "blog": True,
    "bm": True,
    "bn": True,
    "bo": True,
    "br": True,
    "bs": True,
    "bt": True,
    "bw": True,
    "by": True,
    "bz": True,
    "ca": True,
    "cat": True,
    "cc": True,
    "cd": True,
    "center": True,
    "cf": True,
    "cg": True,
    "ch": True,
    "ci": True,
    "city": True,
    "ck": True,
    "cl": True,
    "cloud": True,
    "club": True,
    "cm": True,
    "cn": True,
    "co": True,
    "co.at": True,
    "co.il": True,
    "co.in": True,
    "co.jp": True,
    "co.kr": True,
    "co.nz": True,
    "co.uk": True,
    "co.za": True,
    "com": True,
    "com.ar": True,
    "com.au": True,
    "com.br": True,
    "com.cn": True,
    "com.co": True,
    "com.es": True,
    "com.hk": True,
    "com.mx": True,
    "com.pl": True,
    "com.ru": True,
    "com.sg": True,
    "com.tr": True,
    "com.tw": True,
    "com.ua": True,
    "company": True,
    "coop": True,
    "cr": True,
    "cu": True,
    "cv": True,
    "cw": True,
    "cx": True,
    "cy": True,
    "cz": True,
    "de": True,
    "design": True,
    "dev": True,
    "digital": True,
    "dj": True,
    "dk": True,
    "dm": True,
    "do": True,
    "dz": True,
    "ec": True,
    "edu": True,
    "edu.au": True,
    "ee": True,
    "eg": True,
    "email": True,
    "er": True,
    "es": True,
    "et": True,
    "eu": True,
    "expert": True,
    "fi": True,
    "firm.in": True,
    "fj": True,
    "fk": True,
    "fm": True,
    "fo": True,
    "fr": True,
    "fun": True,
    "ga": True,
    "game": True,
    "games": True,
    "gb": True,
    "gd": True,
    "ge": True,
    "gen.in": True,
    "gf": True,
    "gg": True,
    "gh": True,
    "gi": True,
    "gl": True,
    "global": True,
    "gm": True,
    "gn": True,
    "gov": True,
    "gov.br": True,
    "gov.uk": True,
    "gp": True,
    "gq": True,
    "gr": True,
    "group": True,
    "gs": True,
    "gt": True,
    "gu": True,
    "guru": True,
    "gw": True,
    "gy": True,
    "hk": True,
    "hm": True,
    "hn": True,
    "host": True,
    "hr": True,
    "ht": True,
    "hu": True,
    "id": True,
    "ie": True,
    "il": True,
    "im": True,
    "in": True,
    "ind.in": True,
    "info": True,
    "int": True,
    "io": True,
    "iq": True,
    "ir": True,
    "is": True,
    "it": True,
    "je": True,
    "jm": True,
    "jo": True,
    "jobs": True,
    "jp": True,
    "ke": True,
    "kg": True,
    "kh": True,
    "ki": True,
    "kiev.ua": True,
    "km": True,
    "kn": True,
    "kp": True,
    "kr": True,
    "kw": True,
    "ky": True,
    "kz": True,
    "la": True,
    "land": True,
    "lb": True,
    "lc": True,
    "li": True,
    "life": True,
    "link": True,
    "live": True,
    "lk": True,
    "lr": True,
    "ls": True,
    "lt": True,
    "ltd.uk": True,
    "lu": True,
    "lv": True,
    "ly": True,
    "ma": True,
    "mc": True,
    "md": True,
    "me": True,
    "me.uk": True,
    "media": True,
    "mg": True,
    "mh": True,
    "mil": True,
    "mk": True,
    "ml": True,
    "mm": True,
    "mn": True,
    "mo": True,
    "mobi": True,
    "mp": True,
    "mq": True,
    "mr": True,
    "ms": True,
    "mt": True,
    "mu": True,
    "museum": True,
    "mv": True,
    "mw": True,
    "mx": True,
    "my": True,
    "mz": True,
    "na": True,
    "name": True,
    "nc": True,
    "ne": True,
    "ne.jp": True,
    "net": True,
    "net.au": True,
    "net.br": True,
    "net.cn": True,
    "net.co": True,
    "net.in": True,
    "net.nz": True,
    "net.pl": True,
    "net.uk": True,
    "network": True,
    "news": True,
    "nf": True,
    "ng": True,
    "ni": True,
    "nl": True,
    "no": True,
    "nom.co": True,
    "nom.es": True,
    "np": True,
    "nr": True,
    "nu": True,
    "nz": True,
    "om": True,
    "online": True,
    "or.at": True,
    "or.jp": True,
    "or.kr": True,
    "org": True,
    "org.au": True,
    "org.br": True,
    "org.cn": True,
    "org.es": True,
    "org.il": True,
    "org.in": True,
    "org.mx": True,
    "org.nz": True,
    "org.pl": True,
    "org.uk": True,
    "org.za": True,
    "pa": True,
    "page": True,
    "pe": True,
    "pf": True,
    "pg": True,
    "ph": True,
    "pk": True,
    "pl": True,
    "plc.uk": True,
    "pm": True,
    "pn": True,
    "pr": True,
    "pro": True,
    "ps": True,
    "pt": True,
    "pw": True,
    "py": True,
    "qa": True,
    "re": True,
    "ro": True,
    "rs": True,
    "ru": True,
    "rw": True,
    "sa": True,
    "sb": True,
    "sc": True,
    "sd": True,
    "se": True,
    "services": True,
    "sg": True,
    "sh": True,
    "shop": True,
    "si": True,
    "site": True,
    "sk": True,
    "sl": True,
    "sm": True,
    "sn": True,
    "so": True,
    "software": True,
    "solutions": True,
    "space": True,
    "sr": True,
    "ss": True,
    "st": True,
    "store": True,
    "studio": True,
    "su": True,
    "sv": True,
    "sx": True,
    "sy": True,
    "systems": True,
    "sz": True,
    "tc": True,
    "td": True,
    "tech": True,
    "tel": True,
    "tf": True,
    "tg": True,
    "th": True,
    "tips": True,
    "tj": True,
    "tk": True,
    "tl": True,
    "tm": True,
    "tn": True,
    "to": True,
    "today": True,
    "tools": True,
    "top": True,
    "tr": True,
    "travel": True,
    "tt": True,
    "tv": True,
    "tw": True,
    "tz": True,
    "ua": True,
    "ug": True,
    "uk": True,
    "us": True,
    "uy": True,
    "uz": True,
    "va": True,
    "vc": True,
    "ve": True,
    "vg": True,
    "vi": True,
    "vip": True,
    "vn": True,
    "vu": True,
    "website": True,
    "wf": True,
    "wiki": True,
    "world": True,
    "ws": True,
    "xxx": True,
    "xyz": True,
    "ye": True,
    "yt": True,
    "za": True,
    "zm": True,
    "zone": True,
    "zw": True,
    "рф": True,
    "भारत": True,
    "中国": True,
    "中國": True,
    "公司": True,
    "网络": True,
    "한국": True,
}
