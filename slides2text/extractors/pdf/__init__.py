"""
Raw PDF Slide Text Package
==========================

This package salvages human-readable text from PDF files without building a
PDF object model. It targets decks exported by presentation tools, whose
fonts frequently use custom two-byte glyph codes.

Pipeline
--------
The raw file is scanned once. Every discovered stream flows through the
following steps, each of which may silently drop the stream:

    stream_locator   -> find `stream ... endstream` payloads and their dictionary
    inflate          -> inflate /FlateDecode payloads
    content_filter   -> reject binary payloads (fonts, images)
    text_blocks      -> split a content stream into BT ... ET regions
    string_tokens    -> read literal `( )` and hex `< >` string operands
    glyph_decoding   -> turn string bytes into text, using the document's
                        ToUnicode table built by `to_unicode`
    slide_extractor  -> normalize fragments and assemble the result

Known Limitations
-----------------
- Only the Flate filter is supported
- No cross-reference or object stream parsing
- No font program inspection; single-byte custom encodings decode as Latin-1
- Text order follows the content stream, not the visual layout
"""
