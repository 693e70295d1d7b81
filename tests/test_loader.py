import logging
import plistlib

from acknowlist.loader import load_root_document, load_root_document_from_path

LATIN1_PLIST = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
    <key>PreferenceSpecifiers</key>
    <array>
        <dict><key>FooterText</key><string>En-tête des remerciements</string></dict>
        <dict>
            <key>Title</key><string>Bibliothèque</string>
            <key>FooterText</key><string>Développée à Montréal par une équipe passionnée. Très élégante.</string>
        </dict>
        <dict><key>FooterText</key><string>Généré automatiquement</string></dict>
    </array>
</dict>
</plist>
"""


def test_xml_plist():
    raw = plistlib.dumps({"PreferenceSpecifiers": [{"Title": "A"}]})
    assert load_root_document(raw) == {"PreferenceSpecifiers": [{"Title": "A"}]}

def test_binary_plist():
    raw = plistlib.dumps({"Title": "Acknowledgements"}, fmt=plistlib.FMT_BINARY)
    assert load_root_document(raw) == {"Title": "Acknowledgements"}

def test_empty_payload():
    assert load_root_document(b"") == {}

def test_garbage_payload(caplog):
    with caplog.at_level(logging.WARNING, logger="acknowlist.loader"):
        assert load_root_document(b"<not-a-plist>") == {}
    assert "Could not parse plist payload" in caplog.text

def test_truncated_binary_plist():
    raw = plistlib.dumps({"Title": "Acknowledgements"}, fmt=plistlib.FMT_BINARY)
    assert load_root_document(raw[:12]) == {}

def test_non_dict_root():
    assert load_root_document(plistlib.dumps(["a", "b"])) == {}

def test_mislabeled_latin1_plist():
    # Latin-1 bytes behind a UTF-8 declaration
    root = load_root_document(LATIN1_PLIST.encode("latin-1"))
    specifiers = root["PreferenceSpecifiers"]
    assert len(specifiers) == 3
    assert "Montréal" in specifiers[1]["FooterText"]

def test_missing_file(tmp_path):
    assert load_root_document_from_path(tmp_path / "nope.plist") == {}

def test_file(tmp_path):
    path = tmp_path / "acks.plist"
    path.write_bytes(plistlib.dumps({"PreferenceSpecifiers": []}))
    assert load_root_document_from_path(str(path)) == {"PreferenceSpecifiers": []}
