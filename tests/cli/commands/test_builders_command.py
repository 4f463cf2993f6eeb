from lambda_builder.cli.commands.builders import builders


class TestBuildersCommand:
    """Tests for the builders listing."""

    def test_lists_all_builders(self, cli_runner):
        result = cli_runner.invoke(builders, [])

        assert result.exit_code == 0
        for name in ["dotnet", "go", "nodejs", "python", "ruby"]:
            assert name in result.output
        assert "lambci/lambda:build-go1.x" in result.output
        assert "Detected" not in result.output

    def test_marks_detected_builder(self, cli_runner, project_dir):
        (project_dir / "Gemfile").write_text("")

        result = cli_runner.invoke(builders, ['--working-directory', str(project_dir)])

        assert result.exit_code == 0
        assert "Detected" in result.output
        ruby_line = next(line for line in result.output.splitlines() if line.startswith("ruby"))
        go_line = next(line for line in result.output.splitlines() if line.startswith("go"))
        assert ruby_line.rstrip().endswith("yes")
        assert not go_line.rstrip().endswith("yes")
