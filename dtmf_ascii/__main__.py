from dtmf_ascii.cli import main


raise SystemExit(main())
