#===============================================================================
#  AppCloser  |  Close running desktop apps in one go
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Lists the apps currently running on this desktop, lets the user pick
#  which ones to close, then asks each of them to quit (politely, the way
#  the app's own Quit menu would) one after the other. Apps that prompt to
#  save keep their prompt; a cancelled prompt just leaves that app open.
#
#  Platforms
#  ---------
#    - macOS  : NSWorkspace app list, AppleScript "quit"
#    - Windows: top-level windows (pywin32), WM_CLOSE
#    - Linux  : windowed processes via wmctrl, SIGTERM
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (PySide6, psutil, pywin32, rich)
#  which are licensed separately by their respective authors. Ensure
#  compliance with their license terms when distributing this software.
#===============================================================================

from appcloser.app import main


if __name__ == "__main__":
    raise SystemExit(main())
