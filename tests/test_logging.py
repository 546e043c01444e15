import io

from rmlines import LogLevel, decode_bytes, get_logger, log_document_records, null_logger


def test_logger_gates_on_verbosity():
    stream = io.StringIO()
    log = get_logger(3, stream)

    log(LogLevel.ERROR, "boom")
    log(LogLevel.INFO, "parsing file")
    log(LogLevel.DEBUG, "hidden")
    log(LogLevel.TRACE, "hidden too")

    assert stream.getvalue().splitlines() == ["[error] boom", "[+] parsing file"]


def test_silent_verbosity_prints_nothing():
    stream = io.StringIO()
    log = get_logger(0, stream)
    for level in LogLevel:
        log(level, "anything")
    assert stream.getvalue() == ""


def test_silent_level_is_never_printed():
    stream = io.StringIO()
    get_logger(5, stream)(LogLevel.SILENT, "nothing")
    assert stream.getvalue() == ""


def test_null_logger_accepts_anything():
    assert null_logger(LogLevel.TRACE, "ignored") is None


def test_record_dump_lists_every_level(tmp_path, sample_page_bytes):
    destination = tmp_path / "logs" / "records.txt"
    log_document_records(decode_bytes(sample_page_bytes), destination)

    lines = destination.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "layer[0] lines=1"
    assert lines[1].startswith("  line[0000] brush=PEN color=BLACK size=2.000000")
    assert lines[2].startswith("    pt[0000] (10.000000,20.000000)")
    assert lines[3].startswith("    pt[0001] (15.000000,25.000000)")
    assert len(lines) == 4


def test_record_dump_of_empty_document(tmp_path, rm_builder):
    destination = tmp_path / "records.txt"
    log_document_records(decode_bytes(rm_builder.page([])), destination)
    assert destination.read_text(encoding="utf-8") == ""
