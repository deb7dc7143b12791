"""VFS-CTS test suite.

Folder taxonomy
- unit/         : Single modules in isolation; fakes instead of real backends
                  where a backend is only a collaborator.
- contract/     : Behavior every reference backend must share, parametrized
                  over memory, local and sql; includes full CTS runs.
- integration/  : Backend specifics against real storage (disk, SQLite files).
- e2e/          : The ``vfscts`` command line through Click's CliRunner.
- fixtures/     : Shared pytest plugins (no tests here).

Marks matching the folder are applied automatically by each folder's
conftest. Hypothesis-based tests additionally use ``@pytest.mark.property``.
"""
