from showbooking.cli import main, make_reservation, run_menu


def scripted(*answers):
    """input() replacement that replays answers, then raises EOFError."""
    answers = list(answers)

    def _input(prompt=""):
        if not answers:
            raise EOFError
        return answers.pop(0)
    return _input


class TestReservationFlow:

    def test_successful_reservation(self, office, capsys):
        make_reservation(office, scripted("aaa", "4/1/2025 evening", "2"))
        out = capsys.readouterr().out

        assert "You selected: Inception" in out
        assert "Successfully booked 2 tickets" in out
        assert "Total: $25.00" in out
        assert office.find_showtime("AAA", "4/1/2025 Evening").available_seats == 8

    def test_invalid_code(self, office, capsys):
        make_reservation(office, scripted("ZZZ"))
        assert "Invalid Movie Code" in capsys.readouterr().out

    def test_invalid_showtime(self, office, capsys):
        make_reservation(office, scripted("AAA", "tomorrow"))
        assert "Invalid showtime" in capsys.readouterr().out

    def test_non_numeric_quantity(self, office, capsys):
        make_reservation(office, scripted("AAA", "4/1/2025 Morning", "two"))
        assert "Please enter a valid number." in capsys.readouterr().out

    def test_quantity_out_of_range(self, office, capsys):
        make_reservation(office, scripted("AAA", "4/1/2025 Morning", "11"))
        assert "Must book between 1-10 tickets" in capsys.readouterr().out

    def test_overbooking_message(self, office, capsys):
        make_reservation(office, scripted("CCC", "4/3/2025 Evening", "6"))
        assert "Only 5 seats remaining" in capsys.readouterr().out


class TestMenu:

    def test_view_then_exit(self, office, capsys):
        run_menu(office, scripted("1", "9", "x", "3"))
        out = capsys.readouterr().out

        assert "AAA - Inception (Sci-Fi)" in out
        assert "Invalid choice" in out
        assert "Please enter a valid number." in out
        assert out.rstrip().endswith("Thank you for using our system!")

    def test_end_of_input_exits(self, office, capsys):
        run_menu(office, scripted())
        assert "Thank you" in capsys.readouterr().out


class TestMain:

    def test_missing_catalog(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.txt")]) == 1
        assert "unavailable" in capsys.readouterr().out

    def test_summary(self, catalog_path, capsys):
        assert main([str(catalog_path), "--summary"]) == 0
        out = capsys.readouterr().out

        assert "SHOWTIME AVAILABILITY" in out
        assert "AAA - Inception: 110/150 seats across 2 showtimes" in out

    def test_interactive(self, catalog_path, capsys):
        assert main([str(catalog_path)], input_fn=scripted("2", "BBB", "4/2/2025 Afternoon", "1", "3")) == 0
        assert "Successfully booked 1 tickets" in capsys.readouterr().out

    def test_skipped_rows_warning(self, write_catalog, capsys):
        path = write_catalog(["AAA|Inception|bad|Morning|1|1|1|English|Sci-Fi"])
        assert main([str(path), "--summary"]) == 0
        out = capsys.readouterr().out
        assert "1 catalog rows were skipped" in out
        assert "No showtimes loaded." in out
