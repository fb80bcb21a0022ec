import pytest
from pytest_check import check

from conftest import dry_run, wcmd

REPO = "git@github.com:some-user/arbitrary-repo.git"


class TestCommitCommands:
    """Test g c and g cp."""

    def test_commit(self, invoke):
        result = invoke("c did things")
        assert result.exit_code == 0
        assert result.output == dry_run('git commit -m "did things" && echo Success!')

    def test_commit_and_push(self, invoke):
        result = invoke("c did things -p")
        assert result.output == dry_run(
            'git commit -m "did things" && git push && echo Success!'
        )

    def test_commit_no_verify(self, invoke):
        result = invoke("c -n did things")
        assert result.output == dry_run(
            'git commit --no-verify -m "did things" && echo Success!'
        )

    def test_commit_push_shortcut(self, invoke):
        result = invoke("cp did things -n")
        assert result.output == dry_run(
            'git commit --no-verify -m "did things" && git push && echo Success!'
        )

    def test_commit_requires_message(self, invoke):
        result = invoke("c")
        assert result.exit_code == 2
        assert "Missing argument 'MESSAGE...'" in result.output

    def test_commit_windows(self, invoke):
        result = invoke("c did things -p", os_name="windows")
        assert result.output == dry_run(
            wcmd('git commit -m "did things"'),
            wcmd("git push"),
            wcmd("echo Success!"),
        )

    def test_commit_unknown_os(self, invoke):
        result = invoke("c did things", os_name="beos")
        assert result.exit_code == 1
        assert 'Error: Unknown OS ("beos")' in result.output


@pytest.mark.parametrize(
    "args, executable",
    [
        ("am", "git commit --amend --no-edit"),
        ("b", "git branch"),
        ("f", "git fetch"),
        ("l", "git pull"),
        ("pl", "git pull"),
        ("uco", "git reset HEAD~"),
        ("p", "git push"),
        ("pp", "git pull && git push"),
        ("sh", "eval `ssh-agent` && ssh-add"),
    ],
)
def test_fixed_commands(invoke, args, executable):
    result = invoke(args)
    assert result.exit_code == 0
    assert result.output == dry_run(executable)


def test_pull_push_windows(invoke):
    result = invoke("pp", os_name="windows")
    assert result.output == dry_run(wcmd("git pull"), wcmd("git push"))


class TestFileCommands:
    """Test g a, s, ua, uc and rm."""

    @pytest.mark.parametrize(
        "args, executable",
        [
            ("a", "git add ."),
            ("a un deux", "git add un deux"),
            ("a -w un", "git add un"),
            ("s", "git status "),
            ("s un", "git status un"),
            ("ua", "git reset -- ."),
            ("ua un deux", "git reset -- un deux"),
            ("uc un", "git checkout -- un"),
            ("rm un", "rm un"),
            ("rm -rf build", "rm -rf build"),
        ],
    )
    def test_file_commands(self, invoke, args, executable):
        result = invoke(args)
        assert result.exit_code == 0
        assert result.output == dry_run(executable)

    def test_undo_change_requires_files(self, invoke):
        result = invoke("uc")
        assert result.exit_code == 2

    def test_remove_requires_files(self, invoke):
        result = invoke("rm")
        assert result.exit_code == 2


class TestDiffCommand:
    """Test g d."""

    @pytest.mark.parametrize(
        "args, executable",
        [
            ("d", "git diff  -- "),
            ("d -w", "git diff -w -- "),
            ("d un deux", "git diff  -- un deux"),
            ("d -c", 'git diff  "$(git rev-parse @~1)" '),
            ("d -a un", "git add un"),
            ("d -a", "git add ."),
            ("d -a -m -w un", "git add un"),
        ],
    )
    def test_diff(self, invoke, args, executable):
        result = invoke(args)
        assert result.exit_code == 0
        assert result.output == dry_run(executable)

    def test_diff_against_main(self, invoke, git):
        git("config --get remote.origin.url", stdout=f"{REPO}\n")
        result = invoke("d -m")
        assert result.output == dry_run("git diff  main ")

    def test_diff_against_configured_main(self, invoke, git, write_config):
        write_config(main_branches={REPO: "master"})
        git("config --get remote.origin.url", stdout=f"{REPO}\n")
        result = invoke("d -m -c un")
        assert result.output == dry_run("git diff  master un")

    def test_diff_against_main_outside_repo(self, invoke, git):
        git("config --get remote.origin.url", returncode=1)
        result = invoke("d -m")
        assert result.exit_code == 1
        assert "Error: failed to execute shell command: exit status 1" in result.output


class TestLogCommand:
    """Test g lg."""

    @pytest.mark.parametrize(
        "args, executable",
        [
            ("lg", "git log -n 1"),
            ("lg 4", "git log -n 4"),
            ("lg 0", "git log -n 0"),
            ("lg -d", "git diff HEAD~1 "),
            ("lg 7 -d -w", "git diff HEAD~7 -w"),
        ],
    )
    def test_log(self, invoke, args, executable):
        result = invoke(args)
        assert result.output == dry_run(executable)

    def test_log_rejects_non_numbers(self, invoke):
        result = invoke("lg many")
        assert result.exit_code == 2


class TestStashAndRebase:
    """Test g ush, op and rb."""

    def test_stash_push(self, invoke):
        result = invoke("ush")
        assert result.output == dry_run("git stash push ")

    def test_stash_push_args(self, invoke):
        result = invoke(["ush", "-m", "work in progress"])
        assert result.output == dry_run('git stash push "-m" "work in progress"')

    def test_stash_pop(self, invoke):
        result = invoke("op")
        assert result.output == dry_run("git stash pop ")

    def test_rebase_abort(self, invoke):
        result = invoke("rb a")
        assert result.output == "git rebase --abort\n" + dry_run("git rebase --abort")

    def test_rebase_continue(self, invoke):
        result = invoke("rb c")
        assert result.output == "git rebase --continue\n" + dry_run(
            "git rebase --continue"
        )


def test_aliases(invoke):
    result = invoke("aliases", dry_run=False)
    assert result.exit_code == 0
    lines = result.output.splitlines()
    with check:
        assert "alias gcp='g cp'" in lines
    with check:
        assert "alias gdm='g d -m'" in lines


def test_help_lists_leaves(invoke):
    result = invoke("--help", dry_run=False)
    assert result.exit_code == 0
    for name in ("pr-link", "current", "cfg", "uco", "end"):
        with check:
            assert name in result.output
