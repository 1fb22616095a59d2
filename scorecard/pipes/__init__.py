#
# Copyright (c) nexB Inc. and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See https://github.com/nexB/scancode.io for support or download.
# See https://aboutcode.org for more information about AboutCode FOSS projects.
#

import subprocess


def run_command_safely(command_args, timeout=None, env=None):
    """
    Execute the external commands following security best practices.

    This function is using the subprocess.run function which simplifies running external
    commands. It provides a safer and more straightforward API compared to older methods
    like subprocess.Popen.

    - This does not use the Shell (shell=False) to prevent injection vulnerabilities.
    - The command should be provided as a list of ``command_args`` arguments.
    - The ``timeout`` is the number of seconds allowed for the command to complete.

    Raise a SubprocessError if the exit code was non-zero, or a TimeoutExpired
    (a SubprocessError subclass) when the ``timeout`` is reached.
    """
    completed_process = subprocess.run(  # noqa: S603
        command_args,
        capture_output=True,
        text=True,
        timeout=timeout,
        env=env,
    )

    if completed_process.returncode:
        error_msg = (
            f'Error while executing cmd="{completed_process.args}": '
            f'"{completed_process.stderr.strip()}"'
        )
        raise subprocess.SubprocessError(error_msg)

    return completed_process.stdout
