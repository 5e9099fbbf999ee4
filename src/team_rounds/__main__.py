from team_rounds.cli import main

raise SystemExit(main())
