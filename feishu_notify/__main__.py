from feishu_notify.main import main

raise SystemExit(main())
