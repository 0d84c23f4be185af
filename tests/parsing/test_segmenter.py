from floorlog.core import BlockRole, Document, TextBlock
from floorlog.parsing import find_title_block, parse_document, parse_legislative_day, segment_blocks, segment_updates

FLOOR_LOG_HTML = """
<html>
  <body>
    <div id="sidebar">
      <p align="left">Visitor information</p>
    </div>
    <div id="content">
      <p align="center">SENATE FLOOR PROCEEDINGS</p>
      <p align="center">&nbsp;</p>
      <p align="center">Monday, March 4, 2024</p>
      <p align="left">The Senate convened at 3:00pm.</p>
      <p align="left">Began consideration of  H.R. 815.</p>
      <p align="center">Tuesday, March 5, 2024</p>
      <p align="left">Senate agreed to S. Res. 12.</p>
      <p>Unaligned paragraph</p>
      <p align="left">Senate adjourned.</p>
    </div>
  </body>
</html>
"""


def _block(text, role):
    return TextBlock(text=text, role=role, scopes=(1, 0))


def test_parse_document_assigns_roles_and_scopes():
    document = parse_document(FLOOR_LOG_HTML)

    texts = [block.text.strip() for block in document]
    assert texts[0] == "Visitor information"
    assert document.blocks[1].role is BlockRole.CENTERED
    assert document.blocks[3].role is BlockRole.CENTERED
    assert document.blocks[4].role is BlockRole.LEFT
    assert document.blocks[-2].role is BlockRole.OTHER
    assert document.blocks[0].scopes[0] != document.blocks[1].scopes[0]
    assert document.blocks[1].scopes[0] == document.blocks[-1].scopes[0]


def test_find_title_block_accepts_both_labels():
    first = Document(blocks=(_block("Today’s Senate Floor Log", BlockRole.CENTERED),))
    second = Document(blocks=(_block("  senate floor proceedings ", BlockRole.OTHER),))
    missing = Document(blocks=(_block("Floor Schedule", BlockRole.CENTERED),))

    assert find_title_block(first) is first.blocks[0]
    assert find_title_block(second) is second.blocks[0]
    assert find_title_block(missing) is None


def test_segment_updates_groups_bodies_under_nearest_header():
    document = parse_document(FLOOR_LOG_HTML)
    title = find_title_block(document)

    segmentation = segment_updates(document, title)

    assert segmentation.groups == {
        "2024-03-04": ["The Senate convened at 3:00pm.", "Began consideration of H.R. 815."],
        "2024-03-05": ["Senate agreed to S. Res. 12.", "Senate adjourned."],
    }
    # the sidebar paragraph is outside the title's scope and never reported
    assert segmentation.anomalies == ["Unexpected HTML, a p tag without alignment - may be worth checking"]


def test_body_before_any_header_is_skipped_and_reported():
    blocks = [
        _block("Orphaned update.", BlockRole.LEFT),
        _block("March 3, 2024", BlockRole.CENTERED),
        _block("Senate convened.", BlockRole.LEFT),
    ]

    segmentation = segment_blocks(blocks)

    assert segmentation.groups == {"2024-03-03": ["Senate convened."]}
    assert segmentation.anomalies == ["Unexpected HTML, got to a update without a date, skipping"]


def test_reappearing_date_appends_to_existing_group():
    blocks = [
        _block("March 3, 2024", BlockRole.CENTERED),
        _block("First.", BlockRole.LEFT),
        _block("March 4, 2024", BlockRole.CENTERED),
        _block("Second.", BlockRole.LEFT),
        _block("Sunday, March 3, 2024", BlockRole.CENTERED),
        _block("Third.", BlockRole.LEFT),
    ]

    segmentation = segment_blocks(blocks)

    assert segmentation.groups == {"2024-03-03": ["First.", "Third."], "2024-03-04": ["Second."]}
    assert segmentation.anomalies == []


def test_unparseable_header_clears_the_current_date():
    blocks = [
        _block("March 3, 2024", BlockRole.CENTERED),
        _block("First.", BlockRole.LEFT),
        _block("Wrap Up for the Day", BlockRole.CENTERED),
        _block("Not attributed to March 3.", BlockRole.LEFT),
    ]

    segmentation = segment_blocks(blocks)

    assert segmentation.groups == {"2024-03-03": ["First."]}
    assert len(segmentation.anomalies) == 2


def test_header_without_bodies_yields_empty_group():
    segmentation = segment_blocks([_block("March 3, 2024", BlockRole.CENTERED)])

    assert segmentation.groups == {"2024-03-03": []}


def test_parse_legislative_day():
    assert parse_legislative_day("Monday, March 4, 2024") == "2024-03-04"
    assert parse_legislative_day("March 3, 2024") == "2024-03-03"
    assert parse_legislative_day("Senate convened.") is None
    assert parse_legislative_day("") is None
